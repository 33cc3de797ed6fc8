from typing import Iterable, Protocol

from src.elements import Element, el, empty
from src.forecast import ForecastRow
from src.locations import SearchLocation
from src.log import log

LOADING_TEXT = "Searching..."
ERROR_PREFIX = "Error: "
RESULTS_HEADING = "Results"
COLUMN_LABELS = ("Hour", "Temperature (°C)", "Precipitation (mm)")


class ViewSink(Protocol):
    def mount(self, tree: Element) -> None: ...

    def clear(self) -> None: ...


class DocumentSink:
    """
    ViewSink backed by an element document. The output container is looked up on
    every call so a document without one just logs and skips the render.
    """

    def __init__(self, document: Element, selector: str = ".output"):
        self.document = document
        self.selector = selector

    def _container(self) -> Element | None:
        container = self.document.query_selector(self.selector)
        if container is None:
            log(f"WARN: could not find {self.selector}")
        return container

    def mount(self, tree: Element) -> None:
        container = self._container()
        if container is not None:
            container.append_child(tree)

    def clear(self) -> None:
        container = self._container()
        if container is not None:
            empty(container)


def time_of_day(timestamp: str) -> str:
    _, sep, rest = timestamp.partition("T")
    return rest if sep else ""


def loading_view() -> Element:
    return el("p", {}, LOADING_TEXT)


def forecast_table(rows: Iterable[ForecastRow] | None) -> Element:
    header = el("tr", {}, [el("th", {}, label) for label in COLUMN_LABELS])
    tbody = el("tbody")
    for row in rows or []:
        tbody.append_child(
            el(
                "tr",
                {},
                el("td", {}, time_of_day(row.time)),
                el("td", {}, row.temperature),
                el("td", {}, row.precipitation),
            )
        )
    return el("table", {"class": "forecast"}, el("thead", {}, header), tbody)


def results_view(location: SearchLocation, rows: Iterable[ForecastRow] | None) -> Element:
    return el(
        "section",
        {},
        el("h2", {}, RESULTS_HEADING),
        el("h3", {}, location.title),
        el(
            "p",
            {},
            f"Forecast for the day at latitude {location.lat} and longitude {location.lng}.",
        ),
        forecast_table(rows),
    )


def error_view(error: BaseException) -> Element:
    return el("p", {}, f"{ERROR_PREFIX}{error}")


def _render_into(sink: ViewSink | None, tree: Element) -> None:
    if sink is None:
        log("WARN: no output sink, skipping render")
        return
    sink.clear()
    sink.mount(tree)


def render_loading(sink: ViewSink | None) -> None:
    _render_into(sink, loading_view())


def render_results(sink: ViewSink | None, location: SearchLocation, rows: Iterable[ForecastRow] | None) -> None:
    _render_into(sink, results_view(location, rows))


def render_error(sink: ViewSink | None, error: BaseException) -> None:
    log(f"ERROR: {error!r}")
    _render_into(sink, error_view(error))
