"""
Turns a raw generate_content response into a SearchResult.

The raw response is either the google-genai response object (snake_case
attributes) or a plain dict with the REST field names (camelCase). Every field
may be missing or None at any depth.
"""

from typing import Any, List
from urllib.parse import quote_plus

from ..schemas import PlaceReference, SearchResult

FALLBACK_TEXT = "Não encontrei resultados específicos com estes filtros. Tente ampliar a busca."
MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={query}"


def _field(obj: Any, *names: str) -> Any:
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _response_text(raw: Any) -> str:
    try:
        text = _field(raw, "text")
    except ValueError:
        # the SDK's .text property raises on some non-text parts
        text = None
    return text if isinstance(text, str) and text else FALLBACK_TEXT


def grounding_chunks(raw: Any) -> List[Any]:
    candidates = _field(raw, "candidates") or []
    if not candidates:
        return []
    metadata = _field(candidates[0], "grounding_metadata", "groundingMetadata")
    return list(_field(metadata, "grounding_chunks", "groundingChunks") or [])


def fallback_uri(title: str, place_id: str | None) -> str:
    uri = MAPS_SEARCH_URL.format(query=quote_plus(title))
    if place_id:
        uri += f"&query_place_id={quote_plus(place_id)}"
    return uri


def to_place(chunk: Any) -> PlaceReference | None:
    maps = _field(chunk, "maps")
    title = _field(maps, "title")
    if not title:
        return None
    place_id = _field(maps, "place_id", "placeId")
    uri = _field(maps, "uri") or fallback_uri(title, place_id)
    return PlaceReference(title=title, uri=uri, place_id=place_id)


def normalize_response(raw: Any) -> SearchResult:
    places = []
    for chunk in grounding_chunks(raw):
        place = to_place(chunk)
        if place is not None:
            places.append(place)
    return SearchResult(text=_response_text(raw), places=places)
