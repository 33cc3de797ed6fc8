import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import requests

from src.settings import GEOLOCATION_URL, HTTP_TIMEOUT_SECONDS


class GeolocationErrorKind(Enum):
    PERMISSION_DENIED = "permission_denied"
    UNAVAILABLE = "unavailable"


class GeolocationError(Exception):
    def __init__(self, kind: GeolocationErrorKind, detail: str = ""):
        super().__init__(detail or kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float


class IpGeolocation:
    """
    Approximate the user's position from their IP address.

    `allowed` is asked on every lookup; returning False reports PERMISSION_DENIED
    without touching the network. `client_ip` supplies the address of the person
    using the app, not the host running it; without one the lookup is UNAVAILABLE.
    """

    def __init__(
        self,
        client_ip: Callable[[], str | None],
        allowed: Callable[[], bool] = lambda: True,
        url: str = GEOLOCATION_URL,
    ):
        self._client_ip = client_ip
        self._allowed = allowed
        self._url = url

    def _fetch(self, ip: str) -> dict:
        resp = requests.get(
            self._url.format(ip=ip),
            timeout=HTTP_TIMEOUT_SECONDS,
            headers={"accept": "application/json"},
        )
        resp.raise_for_status()
        return resp.json()

    async def current_position(self) -> Position:
        if not self._allowed():
            raise GeolocationError(GeolocationErrorKind.PERMISSION_DENIED, "location sharing not allowed")
        ip = self._client_ip()
        if not ip:
            raise GeolocationError(GeolocationErrorKind.UNAVAILABLE, "client address unknown")
        try:
            payload = await asyncio.to_thread(self._fetch, ip)
        except (requests.RequestException, ValueError) as exc:
            raise GeolocationError(GeolocationErrorKind.UNAVAILABLE, f"lookup failed: {exc}") from exc

        if not isinstance(payload, dict) or payload.get("error"):
            reason = payload.get("reason") if isinstance(payload, dict) else None
            raise GeolocationError(GeolocationErrorKind.UNAVAILABLE, reason or "lookup returned an error")
        try:
            return Position(float(payload["latitude"]), float(payload["longitude"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise GeolocationError(GeolocationErrorKind.UNAVAILABLE, "lookup returned no coordinates") from exc
