"""Shared fixtures for the test suite."""
import asyncio
import json
from datetime import date
from pathlib import Path
from typing import List, Optional
import pytest
from caseworker.adapters.base import HolidaySource
from caseworker.models.holiday import HolidayLookup, HolidaySnapshot, HolidayUnavailable

FIXTURES = Path(__file__).parent / "fixtures"


def load_calendar_document() -> dict:
    with open(FIXTURES / "bank_holidays.json", "r", encoding="utf-8") as f:
        return json.load(f)


def calendar_document_with(holiday: date, title: str = "Test bank holiday") -> dict:
    """A calendar whose england-and-wales list contains one given holiday."""
    return {
        "england-and-wales": {
            "division": "england-and-wales",
            "events": [
                {"title": title, "date": holiday.isoformat(), "notes": "", "bunting": True},
            ],
        },
        "scotland": {"division": "scotland", "events": []},
    }


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingHolidaySource(HolidaySource):
    """
    Holiday source that replays a list of results and counts fetches.

    The last result is repeated once the list is exhausted.
    """

    def __init__(self, results: List[HolidayLookup], delay: Optional[float] = None):
        super().__init__("counting")
        self.results = list(results)
        self.delay = delay
        self.calls = 0

    async def fetch(self) -> HolidayLookup:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        index = min(self.calls - 1, len(self.results) - 1)
        return self.results[index]


@pytest.fixture
def calendar_document():
    return load_calendar_document()


@pytest.fixture
def snapshot(calendar_document):
    return HolidaySnapshot.from_payload(calendar_document)


@pytest.fixture
def unavailable():
    return HolidayUnavailable(reason="network error")
