from typing import Any, Dict, Optional, Tuple

from ..schemas import GeoLocation, SearchFilters

DEFAULT_CATEGORIES_TEXT = "Mercado, Farmácia e Beleza (Barbearia/Salão)"

CATEGORY_LABELS: Dict[str, str] = {
    "mercado": "Mercado/Supermercado",
    "farmacia": "Farmácia/Drogaria",
    "beleza": "Barbearia/Salão de Beleza",
}

NEARBY_INSTRUCTION = "Busque nas proximidades imediatas."
RADIUS_INSTRUCTION = (
    "IMPORTANTE: Filtre rigorosamente locais num raio máximo de {radius} "
    "a partir do ponto de busca."
)

PROMPT_TEMPLATE = """Localização/Busca: "{query}".

TAREFA:
Identifique e liste os melhores estabelecimentos APENAS nas seguintes categorias: {categories}.
{distance}

REQUISITOS OBRIGATÓRIOS:
1. Use a ferramenta Google Maps para confirmar a existência real dos locais.
2. Você DEVE citar explicitamente os nomes dos locais encontrados para que eles gerem cartões interativos.
3. Na resposta de texto, para cada local, inclua a distância aproximada e um breve destaque.
4. Use **negrito** nos nomes dos estabelecimentos.
5. Se nenhum local for encontrado nas categorias selecionadas dentro da distância, avise claramente.

Se a busca for muito vaga (ex: apenas um nome de rua sem número), procure no centro ou no ponto mais relevante dessa via.
"""


def categories_clause(filters: SearchFilters) -> str:
    if not filters.categories:
        return DEFAULT_CATEGORIES_TEXT
    return " e ".join(CATEGORY_LABELS.get(c, c) for c in filters.categories)


def distance_clause(filters: SearchFilters) -> str:
    if filters.radius and filters.radius != "any":
        return RADIUS_INSTRUCTION.format(radius=filters.radius)
    return NEARBY_INSTRUCTION


def tool_config_for(location: Optional[GeoLocation] = None) -> Dict[str, Any]:
    # Passed as-is to generate_content(config=...); google-genai validates it
    # into GenerateContentConfig.
    config: Dict[str, Any] = {"tools": [{"google_maps": {}}]}
    if location is not None:
        config["tool_config"] = {
            "retrieval_config": {
                "lat_lng": {
                    "latitude": location.latitude,
                    "longitude": location.longitude,
                }
            }
        }
    return config


def build_prompt(
    query: str,
    filters: SearchFilters,
    location: Optional[GeoLocation] = None,
) -> Tuple[str, Dict[str, Any]]:
    """Return the instruction text and the tool configuration for one search."""
    prompt = PROMPT_TEMPLATE.format(
        query=query,
        categories=categories_clause(filters),
        distance=distance_clause(filters),
    )
    return prompt, tool_config_for(location)
