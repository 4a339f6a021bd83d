"""Base holiday source interface."""
import logging
from abc import ABC, abstractmethod
from typing import Any
from caseworker.models.holiday import HolidayLookup, HolidaySnapshot, HolidayUnavailable

logger = logging.getLogger(__name__)


class HolidaySource(ABC):
    """Abstract base class for bank holiday calendar sources."""

    def __init__(self, name: str):
        """
        Initialize the source.

        Args:
            name: Identifier used in log messages (e.g., "govuk", "static")
        """
        self.name = name

    @abstractmethod
    async def fetch(self) -> HolidayLookup:
        """
        Fetch and parse the full calendar document.

        Implementations never raise for network or data problems; they
        return HolidayUnavailable instead.

        Returns:
            HolidaySnapshot on success, HolidayUnavailable otherwise
        """
        pass

    def _parse(self, payload: Any) -> HolidayLookup:
        """Parse a decoded JSON document, degrading to HolidayUnavailable."""
        try:
            return HolidaySnapshot.from_payload(payload)
        except ValueError as e:
            logger.warning("Malformed bank holiday document from %s: %s", self.name, e)
            return HolidayUnavailable(reason=f"malformed calendar document: {e}")
