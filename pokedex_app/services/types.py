from dataclasses import dataclass
from typing import List

ALL = "all"


@dataclass(frozen=True)
class TypeFilter:
    name: str
    emoji: str
    color: str


PRIMARY_TYPE_FILTERS = [
    TypeFilter(ALL,        "⚡", "#6B7280"),
    TypeFilter("fire",     "🔥", "#F59E0B"),
    TypeFilter("water",    "💧", "#3B82F6"),
    TypeFilter("grass",    "🌿", "#10B981"),
    TypeFilter("electric", "⚡", "#FBBF24"),
]

# Se muestran solo tras pulsar "+N"
SECONDARY_TYPE_FILTERS = [
    TypeFilter("psychic", "🔮", "#EC4899"),
    TypeFilter("ice",     "❄️", "#06B6D4"),
    TypeFilter("dragon",  "🐉", "#8B5CF6"),
    TypeFilter("dark",    "🌑", "#64748b"),
    TypeFilter("fairy",   "✨", "#F472B6"),
]


def type_filters(show_more: bool) -> List[TypeFilter]:
    """Filtros de tipo seleccionables; los secundarios se añaden al final."""
    if show_more:
        return PRIMARY_TYPE_FILTERS + SECONDARY_TYPE_FILTERS
    return list(PRIMARY_TYPE_FILTERS)
