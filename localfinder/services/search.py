from typing import Optional

from ..log_config import get_logger
from ..schemas import GeoLocation, SearchFilters, SearchResult
from .gemini_client import GeminiClient
from .normalizer import normalize_response
from .prompt_builder import build_prompt

logger = get_logger(__name__)


async def search_places(
    query: str,
    filters: SearchFilters,
    location: Optional[GeoLocation] = None,
    *,
    client: GeminiClient,
) -> SearchResult:
    prompt, tool_config = build_prompt(query, filters, location)
    logger.info(
        "Search started",
        query=query,
        categories=filters.categories,
        radius=filters.radius,
        has_location=location is not None,
    )

    raw = await client.generate(prompt, tool_config)
    result = normalize_response(raw)

    logger.info("Search finished", query=query, places=len(result.places))
    return result
