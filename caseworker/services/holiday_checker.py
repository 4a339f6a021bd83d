"""Bank holiday lookups for a configured region."""
import logging
from datetime import date, datetime
from typing import Optional, Set, Tuple, Union
from zoneinfo import ZoneInfo
from caseworker.exceptions import HolidayConflictError
from caseworker.models.holiday import HolidayEvent, HolidayUnavailable
from caseworker.services.holiday_cache import HolidayCache

logger = logging.getLogger(__name__)

DEFAULT_REGION = "england-and-wales"

UK_TIMEZONE = ZoneInfo("Europe/London")


def to_calendar_date(when: Union[datetime, date]) -> date:
    """
    Normalize a timestamp or date to its UK calendar day.

    Aware timestamps are converted to Europe/London first; naive ones are
    taken as UK local time.
    """
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone(UK_TIMEZONE)
        return when.date()
    return when


class HolidayChecker:
    """
    Answers bank holiday questions from the cached calendar.

    An unavailable calendar, or one without the requested region, is treated
    as "no holidays": lookups return no match rather than failing.
    """

    def __init__(self, cache: HolidayCache, region: str = DEFAULT_REGION):
        self.cache = cache
        self.region = region

    async def _events(self, region: Optional[str]) -> Optional[Tuple[HolidayEvent, ...]]:
        region = region or self.region
        lookup = await self.cache.get_snapshot()
        if isinstance(lookup, HolidayUnavailable):
            logger.warning("Unable to validate bank holidays - calendar unavailable: %s", lookup.reason)
            return None

        calendar = lookup.calendar(region)
        if calendar is None:
            logger.warning("Unable to validate bank holidays - no calendar for region %s", region)
            return None
        return calendar.events

    async def is_holiday(
        self,
        when: Union[datetime, date],
        region: Optional[str] = None,
    ) -> Optional[HolidayEvent]:
        """
        Check whether a date falls on a bank holiday.

        Args:
            when: Timestamp or date to check; only the calendar day is used
            region: Region identifier, defaults to the configured region

        Returns:
            The first matching event in calendar order, or None
        """
        day = to_calendar_date(when)
        events = await self._events(region)
        if not events:
            return None
        return next((event for event in events if event.date == day), None)

    async def validate_not_holiday(
        self,
        when: Union[datetime, date],
        region: Optional[str] = None,
    ) -> None:
        """Raise HolidayConflictError if ``when`` is a bank holiday."""
        holiday = await self.is_holiday(when, region)
        if holiday is not None:
            raise HolidayConflictError(holiday.title, holiday.date.isoformat())

    async def all_holiday_dates(self, region: Optional[str] = None) -> Set[date]:
        """All bank holiday dates for the region; empty if unavailable."""
        events = await self._events(region)
        if not events:
            return set()
        return {event.date for event in events}
