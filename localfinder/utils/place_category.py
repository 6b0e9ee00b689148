import unicodedata
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CategoryRule:
    category: str
    label: str
    keywords: Tuple[str, ...]


# Order matters: the first rule with a matching keyword wins.
# Keywords are lowercase ASCII; titles are accent-folded before matching.
CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule("mercado", "Mercado", ("mercado", "super", "market", "carrefour", "extra", "dia")),
    CategoryRule("farmacia", "Farmácia", ("farma", "drogaria", "remedio")),
    CategoryRule("beleza", "Beleza", ("barbearia", "barber", "cabelo", "salao", "barba", "beauty")),
)
DEFAULT_RULE = CategoryRule("local", "Local", ())


def fold(title: str) -> str:
    decomposed = unicodedata.normalize("NFKD", title or "")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def match_rule(title: str) -> CategoryRule:
    folded = fold(title)
    for rule in CATEGORY_RULES:
        if any(k in folded for k in rule.keywords):
            return rule
    return DEFAULT_RULE
