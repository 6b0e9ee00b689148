from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional, Tuple

Radius = Literal["1km", "5km", "10km", "any"]
CategoryId = Literal["mercado", "farmacia", "beleza", "local"]


class SearchFilters(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: Tuple[str, ...] = Field(default_factory=tuple, description="ex: ['mercado', 'farmacia']")
    radius: Radius = "any"

    @field_validator("categories")
    @classmethod
    def _dedupe(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = []
        for tag in v:
            if tag not in seen:
                seen.append(tag)
        return tuple(seen)


class GeoLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class PlaceReference(BaseModel):
    title: str
    uri: str
    place_id: Optional[str] = None


class SearchResult(BaseModel):
    text: str
    places: List[PlaceReference] = []


class PlaceCard(PlaceReference):
    category: CategoryId = "local"
    label: str = "Local"


class SearchRequest(BaseModel):
    query: str = Field(..., description="Endereço ou texto de busca")
    filters: SearchFilters = Field(default_factory=SearchFilters)
    location: Optional[GeoLocation] = None
    session_id: Optional[str] = Field(None, max_length=128)


class SearchResponse(BaseModel):
    text: str
    answer_html: str
    places: List[PlaceCard]
    request_token: Optional[int] = None
    superseded: bool = False


class SearchState(BaseModel):
    loading: bool = False
    error: Optional[str] = None
    result: Optional[SearchResult] = None
    request_token: int = 0
