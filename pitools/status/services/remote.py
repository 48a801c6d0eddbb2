"""Outbound lookups: external IP and geo-IP information."""
from __future__ import annotations
import ipaddress
import json
import logging
from typing import Any, Optional, Tuple, Union

import requests
from pydantic import BaseModel, Field, StrictBool, StrictStr, model_validator

from ... import __version__
from ...errors import DecodeError, PiToolsError, TransportError

logger = logging.getLogger("status.remote")

EXTERNAL_IP_URL = "https://domains.google.com/checkip"
GEOIP_BASE_URL = "https://geoip.nekudo.com/api/"
USER_AGENT = f"pitools/{__version__}"
FALLBACK_IP = "0.0.0.0"


class _NullTolerant(BaseModel):
    """`null` fields fall back to their defaults instead of failing."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class GeoIpCountry(_NullTolerant):
    name: str = ""
    code: str = ""


class GeoIpLocation(_NullTolerant):
    accuracy_radius: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    time_zone: str = ""


class GeoInfo(_NullTolerant):
    # the service answers `false` instead of a name for unknown cities
    city: Union[StrictStr, StrictBool, None] = None
    country: GeoIpCountry = Field(default_factory=GeoIpCountry)
    location: GeoIpLocation = Field(default_factory=GeoIpLocation)
    ip: str = ""

    @property
    def city_name(self) -> Optional[str]:
        return self.city if isinstance(self.city, str) else None


def external_ip_address(
    url: str = EXTERNAL_IP_URL,
    timeout: float = 5.0,
    user_agent: str = USER_AGENT,
) -> Tuple[str, Optional[PiToolsError]]:
    try:
        resp = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Failed to fetch external ip: %s", exc)
        return FALLBACK_IP, TransportError(f"failed to fetch external ip: {exc}")

    if resp.status_code != 200:
        logger.warning("Failed to fetch external ip (http %d)", resp.status_code)
        return FALLBACK_IP, TransportError(f"external ip lookup returned http {resp.status_code}", resp.status_code)
    return resp.text.strip(), None


def geo_location(
    ip: str,
    base_url: str = GEOIP_BASE_URL,
    timeout: float = 10.0,
) -> Tuple[GeoInfo, Optional[PiToolsError]]:
    try:
        ip = str(ipaddress.ip_address(ip.strip()))
    except ValueError:
        return GeoInfo(), DecodeError(f"invalid ip address: {ip!r}")
    url = base_url.rstrip("/") + "/" + ip
    try:
        resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Failed to request geo info: %s", exc)
        return GeoInfo(), TransportError(f"failed to request geo info: {exc}")

    if resp.status_code != 200:
        logger.warning("Geo info HTTP error %d", resp.status_code)
        return GeoInfo(), TransportError(f"geo info lookup returned http {resp.status_code}", resp.status_code)

    try:
        return GeoInfo.model_validate(json.loads(resp.content)), None
    except ValueError as exc:
        logger.warning("Failed to parse geo info json: %s", exc)
        return GeoInfo(), DecodeError(f"failed to parse geo info: {exc}")
