# pokedex/seed/mapping.py
"""
Pure functions turning PokeAPI JSON into column dicts for our models.

Nothing in here touches the network or the database so it can be unit tested
against canned payloads.
"""
from __future__ import annotations

import re
from typing import Any, Iterator, Optional

# Display colours used by the type badges
TYPE_COLORS: dict[str, str] = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}
DEFAULT_TYPE_COLOR = "#68A090"

# PokeAPI lists these under /type but no pokemon actually has them
SKIPPED_TYPES = frozenset({"unknown", "shadow"})

ROMAN_GENERATIONS: dict[str, int] = {
    "i": 1,
    "ii": 2,
    "iii": 3,
    "iv": 4,
    "v": 5,
    "vi": 6,
    "vii": 7,
    "viii": 8,
    "ix": 9,
}

DAMAGE_RELATION_MULTIPLIERS: dict[str, float] = {
    "double_damage_to": 2.0,
    "half_damage_to": 0.5,
    "no_damage_to": 0.0,
}

PREFERRED_FLAVOR_VERSION = "red"
LEVEL_UP_METHOD = "level-up"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_FLAVOR_BREAKS = re.compile(r"[\f\n]")


def decimeters_to_meters(value: int | float) -> float:
    return value / 10


def hectograms_to_kilograms(value: int | float) -> float:
    return value / 10


def generation_from_name(name: str | None) -> int:
    """'generation-iv' -> 4. Anything we can't read falls back to generation 1."""
    if not name:
        return 1
    token = name.rsplit("-", 1)[-1].lower()
    return ROMAN_GENERATIONS.get(token, 1)


def make_slug(name: str) -> str:
    return _NON_ALNUM.sub("-", name.lower())


def type_color(name: str) -> str:
    return TYPE_COLORS.get(name, DEFAULT_TYPE_COLOR)


def id_from_url(url: str) -> int:
    """'https://pokeapi.co/api/v2/pokemon-species/25/' -> 25"""
    return int(url.rstrip("/").rsplit("/", 1)[-1])


def _english(entries: list[dict]) -> list[dict]:
    return [e for e in entries if (e.get("language") or {}).get("name") == "en"]


def clean_flavor_text(text: str) -> str:
    return _FLAVOR_BREAKS.sub(" ", text)


def select_flavor_text(
    entries: list[dict] | None,
    preferred_version: str = PREFERRED_FLAVOR_VERSION,
) -> Optional[str]:
    english = _english(entries or [])
    if not english:
        return None

    chosen = next(
        (e for e in english if (e.get("version") or {}).get("name") == preferred_version),
        english[0],
    )
    return clean_flavor_text(chosen["flavor_text"])


def _sprite_urls(sprites: dict | None) -> dict[str, Optional[str]]:
    sprites = sprites or {}
    artwork = ((sprites.get("other") or {}).get("official-artwork") or {}).get("front_default")
    return {
        "sprite_url": sprites.get("front_default"),
        "sprite_shiny_url": sprites.get("front_shiny"),
        "artwork_url": artwork,
    }


def map_pokemon(
    pokemon: dict[str, Any],
    species: dict[str, Any],
    preferred_version: str = PREFERRED_FLAVOR_VERSION,
) -> dict[str, Any]:
    """Column values for a ``Pokemon`` row built from /pokemon/{n} + /pokemon-species/{n}."""
    name = pokemon["name"]
    return {
        "pokedex_id": pokemon["id"],
        "name": name,
        "slug": make_slug(name),
        "description": select_flavor_text(species.get("flavor_text_entries"), preferred_version),
        "height": decimeters_to_meters(pokemon.get("height") or 0),
        "weight": hectograms_to_kilograms(pokemon.get("weight") or 0),
        "base_exp": pokemon.get("base_experience") or 0,
        "capture_rate": species.get("capture_rate") or 0,
        "is_legendary": bool(species.get("is_legendary")),
        "is_mythical": bool(species.get("is_mythical")),
        "generation": generation_from_name((species.get("generation") or {}).get("name")),
        **_sprite_urls(pokemon.get("sprites")),
    }


def map_move(move: dict[str, Any]) -> dict[str, Any]:
    """Column values for a ``Move`` row (minus the type FK) plus the owning type name."""
    return {
        "name": move["name"],
        "category": (move.get("damage_class") or {}).get("name") or "status",
        "power": move.get("power"),
        "accuracy": move.get("accuracy"),
        "pp": move.get("pp") or 0,
        "priority": move.get("priority") or 0,
        "type_name": move["type"]["name"],
    }


def map_ability(ability: dict[str, Any]) -> dict[str, Any]:
    english_effects = _english(ability.get("effect_entries") or [])
    effect = english_effects[0] if english_effects else {}

    description = effect.get("short_effect")
    if not description:
        description = select_flavor_text(ability.get("flavor_text_entries")) or ""

    return {
        "name": ability["name"],
        "description": description,
        "effect": effect.get("effect"),
    }


def pokemon_move_rows(moves: list[dict] | None) -> list[dict[str, Any]]:
    """
    Flatten /pokemon/{n}.moves into one row per (move, learn method).

    PokeAPI repeats a move once per version group; the last entry for a
    method is the most recent game, so that one wins.
    """
    rows: dict[tuple[str, str], dict[str, Any]] = {}
    for entry in moves or []:
        move = entry["move"]
        for detail in entry.get("version_group_details") or []:
            method = detail["move_learn_method"]["name"]
            level = detail.get("level_learned_at") if method == LEVEL_UP_METHOD else None
            rows[(move["name"], method)] = {
                "move_name": move["name"],
                "move_url": move["url"],
                "learn_method": method,
                "level_learned": level,
            }
    return list(rows.values())


_EVOLUTION_DETAIL_COLUMNS = {"trigger", "min_level", "item", "location", "time_of_day"}


def _named(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("name")
    return value


def map_evolution_details(details: list[dict] | None) -> dict[str, Any]:
    """Qualifiers for an ``Evolution`` edge; only the first detail block is used."""
    detail = (details or [{}])[0]

    extras = []
    for key in sorted(detail):
        if key in _EVOLUTION_DETAIL_COLUMNS:
            continue
        value = _named(detail[key])
        if value is None or value is False or value == "":
            continue
        extras.append(f"{key}={value}")

    return {
        "trigger": _named(detail.get("trigger")) or LEVEL_UP_METHOD,
        "min_level": detail.get("min_level"),
        "item": _named(detail.get("item")),
        "location": _named(detail.get("location")),
        "time_of_day": detail.get("time_of_day") or None,
        "condition": ", ".join(extras) or None,
    }


def iter_evolution_edges(chain: dict[str, Any]) -> Iterator[tuple[int, int, dict[str, Any]]]:
    """Walk an evolution-chain tree yielding (from_species_id, to_species_id, qualifiers)."""
    stack = [chain]
    while stack:
        node = stack.pop()
        parent_id = id_from_url(node["species"]["url"])
        for child in node.get("evolves_to") or []:
            yield parent_id, id_from_url(child["species"]["url"]), map_evolution_details(
                child.get("evolution_details")
            )
            stack.append(child)
