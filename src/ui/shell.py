from typing import Callable, Iterable

from src.elements import Element, el
from src.locations import SearchLocation, check_locations, is_my_location
from src.log import log

APP_TITLE = "The Distinguished Weather Browser"
INTRO_TEXT = "Pick a place to see its temperature and precipitation forecast."
LOCATIONS_HEADING = "Locations"


def location_button(title: str, on_click: Callable[[], None]) -> Element:
    return el(
        "li",
        {"class": "locations__location"},
        el("button", {"class": "locations__button", "click": on_click}, title),
    )


def render(
    container: Element,
    locations: Iterable[SearchLocation],
    on_search: Callable[[SearchLocation], None],
    on_search_my_location: Callable[[], None],
) -> Element:
    """
    Build the page shell once: header, intro, location buttons and an empty output area.
    """
    locations = check_locations(locations)

    def handler(location: SearchLocation) -> Callable[[], None]:
        def on_click():
            if is_my_location(location):
                on_search_my_location()
            else:
                log(f"location selected: {location.title}")
                on_search(location)

        return on_click

    shell = el(
        "main",
        {"class": "weather"},
        el("header", {}, el("h1", {}, APP_TITLE)),
        el(
            "div",
            {"class": "intro"},
            el("p", {}, INTRO_TEXT),
            el("h2", {}, LOCATIONS_HEADING),
        ),
        el(
            "div",
            {"class": "locations"},
            el(
                "ul",
                {"class": "locations__list"},
                [location_button(location.title, handler(location)) for location in locations],
            ),
        ),
        el("div", {"class": "output"}),
    )
    container.append_child(shell)
    return shell
