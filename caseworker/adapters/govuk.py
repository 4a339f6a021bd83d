"""GOV.UK bank holidays source."""
import asyncio
import logging
from typing import Optional
import httpx
from caseworker.adapters.base import HolidaySource
from caseworker.models.holiday import HolidayLookup, HolidayUnavailable

logger = logging.getLogger(__name__)

BANK_HOLIDAYS_URL = "https://www.gov.uk/bank-holidays.json"


class GovUkHolidaySource(HolidaySource):
    """Fetches the public GOV.UK bank holidays feed (no API key)."""

    def __init__(
        self,
        url: str = BANK_HOLIDAYS_URL,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("govuk")
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self) -> HolidayLookup:
        """
        Make one GET request and parse the response.

        ``timeout`` bounds the whole request, body included, not just each
        connect or read.
        """
        logger.info("Fetching bank holidays", extra={"url": self.url})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await asyncio.wait_for(
                    client.get(self.url, headers={"accept": "application/json"}),
                    self.timeout,
                )
                if response.status_code != 200:
                    body_snippet = (response.text or "")[:200]
                    logger.warning(
                        "Bank holidays API non-200: status=%s body=%s",
                        response.status_code,
                        body_snippet,
                    )
                    return HolidayUnavailable(reason=f"API returned {response.status_code}")
                payload = response.json()
        except asyncio.TimeoutError:
            logger.warning("Bank holidays fetch timed out after %ss", self.timeout)
            return HolidayUnavailable(reason=f"timed out after {self.timeout}s")
        except httpx.HTTPError as e:
            logger.warning("Bank holidays fetch failed: %s", e)
            return HolidayUnavailable(reason=str(e) or type(e).__name__)
        except ValueError as e:
            logger.warning("Bank holidays response is not JSON: %s", e)
            return HolidayUnavailable(reason="response is not valid JSON")

        return self._parse(payload)
