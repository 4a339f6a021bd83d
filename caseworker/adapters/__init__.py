from .base import HolidaySource
from .govuk import GovUkHolidaySource
from .static import StaticHolidaySource
from .factory import get_holiday_source

__all__ = [
    "HolidaySource",
    "GovUkHolidaySource",
    "StaticHolidaySource",
    "get_holiday_source",
]
