"""Client for the bulk postal-code radius service (zipcodeapi.com)."""

import logging
from typing import List, Optional

import httpx

from ...core.config import settings

logger = logging.getLogger(__name__)


class ZipRadiusClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = (api_key if api_key is not None else settings.zip_radius_api_key).strip()
        self.base_url = settings.zip_radius_api_base_url.rstrip("/")
        self.timeout = settings.geocode_timeout_seconds
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def zip_codes_within(self, zip_code: str, radius_miles: float) -> List[str]:
        """
        Postal codes within ``radius_miles`` of ``zip_code``.

        Raises httpx.HTTPError on transport failures and non-2xx responses so
        the caller can treat the tier as unavailable.
        """
        url = f"{self.base_url}/{self.api_key}/radius.json/{zip_code}/{radius_miles:g}/mile"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            data = resp.json()

        codes: List[str] = []
        for entry in data.get("zip_codes") or []:
            code = str(entry.get("zip_code") or "").strip()
            if code:
                codes.append(code)
        logger.debug("Radius service returned %d codes around %s", len(codes), zip_code)
        return codes
