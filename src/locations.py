from dataclasses import dataclass

MY_LOCATION_TITLE = "My location (requires permission)"
CURRENT_POSITION_TITLE = "My Location"


@dataclass(frozen=True)
class SearchLocation:
    title: str
    lat: float | None = None
    lng: float | None = None


DEFAULT_LOCATIONS = (
    SearchLocation(MY_LOCATION_TITLE),
    SearchLocation("Reykjavík", 64.1355, -21.8954),
    SearchLocation("Akureyri", 65.6835, -18.0878),
    SearchLocation("New York", 40.7128, -74.006),
    SearchLocation("Tokyo", 35.6764, 139.65),
    SearchLocation("Sydney", 33.8688, 151.2093),
)


def is_my_location(location: SearchLocation) -> bool:
    return location.title == MY_LOCATION_TITLE


def check_locations(locations) -> tuple[SearchLocation, ...]:
    """
    Validate a location list: exactly one "my location" entry, coordinates on all others.
    """
    locations = tuple(locations)
    sentinels = [loc for loc in locations if is_my_location(loc)]
    if len(sentinels) != 1:
        raise ValueError(f"expected exactly one '{MY_LOCATION_TITLE}' entry, found {len(sentinels)}")
    for loc in locations:
        if is_my_location(loc):
            continue
        if loc.lat is None or loc.lng is None:
            raise ValueError(f"location '{loc.title}' is missing coordinates")
    return locations
