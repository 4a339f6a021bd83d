"""Bank holiday calendar models."""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class HolidayEvent(BaseModel):
    """A single bank holiday as published by the calendar feed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(..., description="Holiday name")
    date: date
    notes: str = Field(default="", description="Publisher notes, e.g. 'Substitute day'")
    bunting: bool = Field(default=False, description="Whether bunting is flown")


class RegionalCalendar(BaseModel):
    """Holiday events for one region, in publication order."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    division: str = Field(..., description="Region identifier, e.g. 'england-and-wales'")
    events: Tuple[HolidayEvent, ...] = Field(default=(), description="Holiday events")


class HolidaySnapshot(BaseModel):
    """Full parsed calendar document, keyed by region identifier."""

    model_config = ConfigDict(frozen=True)

    regions: Dict[str, RegionalCalendar] = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "HolidaySnapshot":
        """
        Build a snapshot from the raw calendar JSON document.

        Top-level keys whose value is not a region object (a dict with an
        ``events`` list) are ignored.

        Raises:
            ValueError: If the document is not an object or a region does not validate
        """
        if not isinstance(payload, dict):
            raise ValueError("Calendar document must be a JSON object")

        regions = {}
        for key, value in payload.items():
            if not isinstance(value, dict) or "events" not in value:
                continue
            regions[key] = RegionalCalendar.model_validate(
                {**value, "division": value.get("division") or key}
            )
        return cls(regions=regions)

    def calendar(self, region: str) -> Optional[RegionalCalendar]:
        """Get the calendar for a region, if the document has one."""
        return self.regions.get(region)


class HolidayUnavailable(BaseModel):
    """The calendar could not be fetched or parsed."""

    model_config = ConfigDict(frozen=True)

    reason: str = Field(..., description="Why the calendar is unavailable")


HolidayLookup = Union[HolidaySnapshot, HolidayUnavailable]


class HolidayDatesResponse(BaseModel):
    """Bank holiday dates for the configured region."""

    region: str
    dates: List[date] = Field(default_factory=list, description="Sorted holiday dates")
