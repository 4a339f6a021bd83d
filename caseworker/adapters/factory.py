"""Factory for creating holiday sources."""
from caseworker.adapters.base import HolidaySource
from caseworker.adapters.govuk import GovUkHolidaySource
from caseworker.adapters.static import StaticHolidaySource
from caseworker.config import Settings


def get_holiday_source(settings: Settings) -> HolidaySource:
    """
    Create the holiday source named by ``settings.holiday_source``.

    Args:
        settings: Application settings

    Returns:
        HolidaySource instance

    Raises:
        ValueError: If the source name is unknown
    """
    name = settings.holiday_source.lower()
    if name == "govuk":
        return GovUkHolidaySource(
            url=settings.bank_holidays_url,
            timeout=settings.holiday_fetch_timeout_seconds,
        )
    elif name == "static":
        return StaticHolidaySource(path=settings.bank_holidays_file)
    raise ValueError(f"Unknown holiday source: {settings.holiday_source}")
