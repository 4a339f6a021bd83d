"""Static holiday source for running without network access."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from caseworker.adapters.base import HolidaySource
from caseworker.models.holiday import HolidayLookup, HolidayUnavailable

logger = logging.getLogger(__name__)


class StaticHolidaySource(HolidaySource):
    """Serves a fixed calendar document from memory or a JSON file."""

    def __init__(
        self,
        payload: Optional[Dict[str, Any]] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        super().__init__("static")
        self.payload = payload
        self.path = Path(path) if path else None

    async def fetch(self) -> HolidayLookup:
        if self.path is not None:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    return self._parse(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning("Unable to read bank holidays file %s: %s", self.path, e)
                return HolidayUnavailable(reason=f"cannot read {self.path}")

        if self.payload is None:
            return HolidayUnavailable(reason="no static calendar configured")
        return self._parse(self.payload)
