from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# Orden canónico de PokéAPI; los consumidores leen stats[0]/[1]/[2] como hp/attack/defense
STAT_KEYS = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")
HP, ATTACK, DEFENSE = 0, 1, 2

MAX_BASE_STAT = 255
FALLBACK_SPRITE = "/fallback-pokeball.png"


def _label(name: str) -> str:
    # "special-attack" -> "special attack" (solo el primer guion)
    return name.replace("-", " ", 1)


@dataclass(frozen=True)
class PokemonRef:
    name: str
    url: str


@dataclass(frozen=True)
class TypeTag:
    name: str


@dataclass(frozen=True)
class Stat:
    name: str
    base_value: int

    @property
    def label(self) -> str:
        return _label(self.name)

    @property
    def percent(self) -> float:
        """Ancho de la barra de stat, 0-100."""
        return min(self.base_value / MAX_BASE_STAT * 100, 100)


@dataclass(frozen=True)
class AbilityTag:
    name: str

    @property
    def label(self) -> str:
        return _label(self.name)


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    types: Tuple[TypeTag, ...]
    stats: Tuple[Stat, ...]
    abilities: Tuple[AbilityTag, ...] = ()
    height: int = 0  # decímetros
    weight: int = 0  # hectogramos
    sprite_url: Optional[str] = None

    def __post_init__(self):
        if self.id < 1:
            raise ValueError(f"id inválido para '{self.name}': {self.id}")
        if len(self.stats) != len(STAT_KEYS):
            raise ValueError(f"'{self.name}' tiene {len(self.stats)} stats, se esperaban {len(STAT_KEYS)}")

    @property
    def hp(self) -> int:
        return self.stats[HP].base_value

    @property
    def attack(self) -> int:
        return self.stats[ATTACK].base_value

    @property
    def defense(self) -> int:
        return self.stats[DEFENSE].base_value

    @property
    def type_names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self.types)

    def has_type(self, type_name: str) -> bool:
        return any(t.name == type_name for t in self.types)

    @property
    def display_id(self) -> str:
        return f"#{self.id:03d}"

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10

    @property
    def image_url(self) -> str:
        return self.sprite_url or FALLBACK_SPRITE

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Pokemon":
        """
        Construye un Pokemon desde la respuesta de /pokemon/<id>.
        Lanza KeyError/TypeError/ValueError si el payload no tiene la forma esperada.
        """
        types = tuple(TypeTag(t["type"]["name"]) for t in data.get("types", []))
        stats = tuple(Stat(s["stat"]["name"], int(s["base_stat"])) for s in data["stats"])
        abilities = tuple(AbilityTag(a["ability"]["name"]) for a in data.get("abilities", []))
        return cls(
            id=int(data["id"]),
            name=data["name"],
            types=types,
            stats=stats,
            abilities=abilities,
            height=int(data.get("height") or 0),
            weight=int(data.get("weight") or 0),
            sprite_url=sprite_from_api(data.get("sprites")),
        )


def sprite_from_api(sprites: Optional[Dict[str, Any]]) -> Optional[str]:
    """official-artwork -> front_default -> None."""
    if not sprites:
        return None
    other = sprites.get("other") or {}
    artwork = (other.get("official-artwork") or {}).get("front_default")
    return artwork or sprites.get("front_default") or None
