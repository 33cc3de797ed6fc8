import asyncio
import inspect
from typing import Callable

from src.forecast import weather_search as default_weather_search
from src.geolocation import GeolocationError, GeolocationErrorKind
from src.locations import CURRENT_POSITION_TITLE, SearchLocation
from src.log import log
from src.views import ViewSink, render_error, render_loading, render_results

UNSUPPORTED_MESSAGE = "Your browser does not support geolocation."
GEOLOCATION_MESSAGES = {
    GeolocationErrorKind.PERMISSION_DENIED: "You declined the request to share your location.",
    GeolocationErrorKind.UNAVAILABLE: "Could not access your location.",
}


class SearchController:
    """
    Drives the loading -> fetch -> results/error sequence into a single sink.

    Every search takes a generation number when it starts. A search that settles
    after a newer one has started is dropped, so the newest search owns the output.
    """

    def __init__(self, sink: ViewSink | None, weather_search: Callable = default_weather_search, geolocation=None):
        self.sink = sink
        self._weather_search = weather_search
        self._geolocation = geolocation
        self._generation = 0

    def _start(self) -> int:
        self._generation += 1
        render_loading(self.sink)
        return self._generation

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    async def _fetch(self, location: SearchLocation):
        if inspect.iscoroutinefunction(self._weather_search):
            return await self._weather_search(location.lat, location.lng)
        return await asyncio.to_thread(self._weather_search, location.lat, location.lng)

    async def on_search(self, location: SearchLocation) -> None:
        log(f"search: {location.title} ({location.lat}, {location.lng})")
        token = self._start()
        try:
            results = await self._fetch(location)
        except Exception as exc:
            if self._is_current(token):
                render_error(self.sink, exc)
            else:
                log(f"stale search failed, dropped: {location.title}: {exc}")
            return

        if not self._is_current(token):
            log(f"stale search settled, dropped: {location.title}")
            return
        render_results(self.sink, location, results or [])

    async def on_search_my_location(self) -> None:
        if self._geolocation is None:
            self._generation += 1
            render_error(self.sink, RuntimeError(UNSUPPORTED_MESSAGE))
            return

        token = self._start()
        try:
            position = await self._geolocation.current_position()
        except GeolocationError as exc:
            log(f"geolocation failed ({exc.kind.value}): {exc}")
            if self._is_current(token):
                render_error(self.sink, RuntimeError(GEOLOCATION_MESSAGES[exc.kind]))
            return

        if not self._is_current(token):
            log("stale geolocation lookup, dropped")
            return
        location = SearchLocation(CURRENT_POSITION_TITLE, position.latitude, position.longitude)
        await self.on_search(location)
