# pokedex/seed/seeder.py
from __future__ import annotations

from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from pokedex.database import get_or_create
from pokedex.models import (
    Ability,
    Evolution,
    Move,
    Pokemon,
    PokemonAbility,
    PokemonMove,
    PokemonStat,
    PokemonType,
    Stat,
    Type,
    TypeEffectiveness,
)
from pokedex.models.stat import CANONICAL_STATS
from pokedex.seed.client import PokeAPIClient
from pokedex.seed.mapping import (
    DAMAGE_RELATION_MULTIPLIERS,
    PREFERRED_FLAVOR_VERSION,
    SKIPPED_TYPES,
    iter_evolution_edges,
    map_ability,
    map_move,
    map_pokemon,
    pokemon_move_rows,
    type_color,
)


class SeedReport(BaseModel):
    """Outcome of one ``seed_pokemon`` run, by national dex number."""

    requested: int = 0
    created: list[int] = Field(default_factory=list)
    existing: list[int] = Field(default_factory=list)
    failed: list[int] = Field(default_factory=list)

    # evolution-chain URLs seen on the species records, in first-seen order
    evolution_chains: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.created) + len(self.existing)


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

def _get_or_create_type(db: Session, name: str) -> Type:
    row, _ = get_or_create(db, Type, defaults={"color": type_color(name)}, name=name)
    return row


async def seed_types(db: Session, client: PokeAPIClient) -> int:
    """Upsert every real type and its damage relations. Returns the number of types stored."""
    logger.info("Seeding Pokemon types...")

    listing = await client.get_type_list()
    details: list[dict] = []
    for entry in listing.get("results", []):
        if entry["name"] in SKIPPED_TYPES:
            continue

        detail = await client.get(entry["url"])
        _, created = get_or_create(
            db, Type, defaults={"color": type_color(detail["name"])}, name=detail["name"]
        )
        if created:
            logger.info("  Created type: {}", detail["name"])
        details.append(detail)

    # Second pass so every defending type already exists
    for detail in details:
        attacking = _get_or_create_type(db, detail["name"])
        relations = detail.get("damage_relations") or {}
        for relation, multiplier in DAMAGE_RELATION_MULTIPLIERS.items():
            for target in relations.get(relation) or []:
                if target["name"] in SKIPPED_TYPES:
                    continue
                defending = _get_or_create_type(db, target["name"])
                get_or_create(
                    db,
                    TypeEffectiveness,
                    defaults={"multiplier": multiplier},
                    attacking_type_id=attacking.id,
                    defending_type_id=defending.id,
                )

    db.commit()
    logger.info("Pokemon types seeded ({} types)", len(details))
    return len(details)


def seed_stats(db: Session) -> None:
    for name in CANONICAL_STATS:
        get_or_create(db, Stat, name=name)
    db.commit()


async def _ensure_move(db: Session, client: PokeAPIClient, name: str, url: str) -> Move:
    move = db.query(Move).filter(Move.name == name).first()
    if move is not None:
        return move

    values = map_move(await client.get(url))
    move_type = _get_or_create_type(db, values.pop("type_name"))
    move_name = values.pop("name")
    move, _ = get_or_create(db, Move, defaults={**values, "type_id": move_type.id}, name=move_name)
    return move


async def _ensure_ability(
    db: Session, client: PokeAPIClient, name: str, url: str, is_hidden: bool
) -> Ability:
    ability = db.query(Ability).filter(Ability.name == name).first()
    if ability is not None:
        return ability

    values = map_ability(await client.get(url))
    ability_name = values.pop("name")
    ability, _ = get_or_create(
        db, Ability, defaults={**values, "is_hidden": is_hidden}, name=ability_name
    )
    return ability


# ---------------------------------------------------------------------------
# Pokemon
# ---------------------------------------------------------------------------

async def seed_one_pokemon(
    db: Session,
    client: PokeAPIClient,
    number: int,
    preferred_version: str = PREFERRED_FLAVOR_VERSION,
) -> tuple[Pokemon, bool, Optional[str]]:
    """
    Fetch pokemon #number plus its species and upsert it with all junction rows.

    Does not commit. Returns (pokemon, created, evolution_chain_url).
    """
    data = await client.get_pokemon(number)
    species = await client.get_species(data["species"]["url"])

    values = map_pokemon(data, species, preferred_version)
    pokedex_id = values.pop("pokedex_id")
    pokemon, created = get_or_create(db, Pokemon, defaults=values, pokedex_id=pokedex_id)

    for entry in data.get("types") or []:
        type_row = _get_or_create_type(db, entry["type"]["name"])
        get_or_create(
            db, PokemonType, defaults={"type_id": type_row.id},
            pokemon_id=pokemon.id, slot=entry["slot"],
        )

    for entry in data.get("abilities") or []:
        ability = await _ensure_ability(
            db, client, entry["ability"]["name"], entry["ability"]["url"], bool(entry.get("is_hidden"))
        )
        get_or_create(
            db,
            PokemonAbility,
            defaults={"ability_id": ability.id, "is_hidden": bool(entry.get("is_hidden"))},
            pokemon_id=pokemon.id,
            slot=entry["slot"],
        )

    for entry in data.get("stats") or []:
        stat, _ = get_or_create(db, Stat, name=entry["stat"]["name"])
        get_or_create(
            db,
            PokemonStat,
            defaults={"base_stat": entry["base_stat"], "effort": entry.get("effort") or 0},
            pokemon_id=pokemon.id,
            stat_id=stat.id,
        )

    for row in pokemon_move_rows(data.get("moves")):
        move = await _ensure_move(db, client, row["move_name"], row["move_url"])
        get_or_create(
            db,
            PokemonMove,
            defaults={"level_learned": row["level_learned"]},
            pokemon_id=pokemon.id,
            move_id=move.id,
            learn_method=row["learn_method"],
        )

    chain_url = (species.get("evolution_chain") or {}).get("url")
    return pokemon, created, chain_url


async def seed_pokemon(
    db: Session,
    client: PokeAPIClient,
    count: int,
    preferred_version: str = PREFERRED_FLAVOR_VERSION,
) -> SeedReport:
    """
    Seed national dex #1..#count one at a time.

    A failure on one record is logged and rolled back; the loop moves on to
    the next number. Nothing is retried.
    """
    logger.info("Seeding {} Pokemon...", count)
    report = SeedReport(requested=count)

    for number in range(1, count + 1):
        try:
            pokemon, created, chain_url = await seed_one_pokemon(db, client, number, preferred_version)
            db.commit()
        except Exception as exc:
            db.rollback()
            logger.error("Failed to seed Pokemon #{}: {}", number, exc)
            report.failed.append(number)
            continue

        if created:
            logger.info("  Created #{:03d} {}", pokemon.pokedex_id, pokemon.name)
            report.created.append(number)
        else:
            report.existing.append(number)

        if chain_url and chain_url not in report.evolution_chains:
            report.evolution_chains.append(chain_url)

    logger.info(
        "Pokemon seeding done: {}/{} stored ({} created, {} already stored), {} failed",
        report.succeeded,
        report.requested,
        len(report.created),
        len(report.existing),
        len(report.failed),
    )
    if report.failed:
        logger.warning("Skipped Pokemon: {}", report.failed)
    return report


# ---------------------------------------------------------------------------
# Evolutions
# ---------------------------------------------------------------------------

def _upsert_chain(db: Session, chain: dict) -> int:
    stored = 0
    for from_id, to_id, qualifiers in iter_evolution_edges(chain):
        source = db.query(Pokemon).filter(Pokemon.pokedex_id == from_id).first()
        target = db.query(Pokemon).filter(Pokemon.pokedex_id == to_id).first()
        if source is None or target is None:
            continue

        get_or_create(
            db,
            Evolution,
            defaults=qualifiers,
            from_pokemon_id=source.id,
            to_pokemon_id=target.id,
        )
        stored += 1
    return stored


async def seed_evolutions(db: Session, client: PokeAPIClient, chain_urls: list[str]) -> int:
    """Upsert evolution edges between already-stored pokemon. Returns edges touched."""
    logger.info("Seeding {} evolution chains...", len(chain_urls))

    total = 0
    for url in chain_urls:
        try:
            data = await client.get(url)
            total += _upsert_chain(db, data["chain"])
            db.commit()
        except Exception as exc:
            db.rollback()
            logger.error("Failed to seed evolution chain {}: {}", url, exc)

    logger.info("Evolutions seeded ({} edges)", total)
    return total
