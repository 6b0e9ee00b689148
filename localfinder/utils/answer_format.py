import re
from typing import Dict, List, Tuple

from jinja2 import Environment

BOLD_SPLIT = re.compile(r"(\*\*.*?\*\*)")

Span = Tuple[str, bool]

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

ANSWER_TEMPLATE = _env.from_string(
    """{% macro inline(spans) %}{% for text, bold in spans %}{% if bold %}<strong>{{ text }}</strong>{% else %}{{ text }}{% endif %}{% endfor %}{% endmacro %}
{% for block in blocks %}
{% if block.kind == "break" %}
<br>
{% elif block.kind == "header" %}
<h3>{{ inline(block.spans) }}</h3>
{% elif block.kind == "item" %}
<li>{{ inline(block.spans) }}</li>
{% else %}
<p>{{ inline(block.spans) }}</p>
{% endif %}
{% endfor %}
"""
)


def parse_inline(content: str) -> List[Span]:
    spans = []
    for part in BOLD_SPLIT.split(content):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            spans.append((part[2:-2], True))
        else:
            spans.append((part, False))
    return spans


def parse_answer(text: str) -> List[Dict]:
    """Split the model answer into break/header/item/paragraph blocks."""
    blocks = []
    for line in (text or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            blocks.append({"kind": "break", "spans": []})
        elif trimmed.startswith("**") and ":" not in trimmed:
            blocks.append({"kind": "header", "spans": parse_inline(trimmed)})
        elif trimmed.startswith("* ") or trimmed.startswith("- "):
            blocks.append({"kind": "item", "spans": parse_inline(trimmed[2:])})
        else:
            blocks.append({"kind": "paragraph", "spans": parse_inline(trimmed)})
    return blocks


def render_answer(text: str) -> str:
    return ANSWER_TEMPLATE.render(blocks=parse_answer(text)).strip()
