"""The fixed, ordered catalog of selectable Japanese cities."""

from tenki.models.weather import CityEntry

CITY_CATALOG: tuple[CityEntry, ...] = (
    CityEntry(id="tokyo", display_name="東京", query_name="Tokyo"),
    CityEntry(id="osaka", display_name="大阪", query_name="Osaka"),
    CityEntry(id="yokohama", display_name="横浜", query_name="Yokohama"),
    CityEntry(id="nagoya", display_name="名古屋", query_name="Nagoya"),
    CityEntry(id="sapporo", display_name="札幌", query_name="Sapporo"),
    CityEntry(id="fukuoka", display_name="福岡", query_name="Fukuoka"),
    CityEntry(id="kyoto", display_name="京都", query_name="Kyoto"),
    CityEntry(id="kobe", display_name="神戸", query_name="Kobe"),
    CityEntry(id="sendai", display_name="仙台", query_name="Sendai"),
    CityEntry(id="hiroshima", display_name="広島", query_name="Hiroshima"),
    CityEntry(id="okinawa", display_name="沖縄", query_name="Okinawa"),
)

_BY_ID: dict[str, CityEntry] = {c.id: c for c in CITY_CATALOG}


def find_city(city_id: str | None) -> CityEntry | None:
    """Look up a catalog entry by id. Returns None if unknown."""
    if city_id is None:
        return None
    return _BY_ID.get(city_id)
