# pokedex/seed/verify.py
from __future__ import annotations

from loguru import logger
from sqlalchemy.orm import Session, selectinload

from pokedex.models import Pokemon, PokemonType, Type


def format_entry(pokemon: Pokemon) -> str:
    """'No.001 Bulbasaur (grass/poison)'"""
    types = "/".join(pt.type.name for pt in pokemon.types)
    return f"No.{pokemon.pokedex_id:03d} {pokemon.name.capitalize()} ({types})"


def verify_data(db: Session, sample_size: int = 5) -> dict[str, int]:
    """Log a quick sanity report on what the seed left in the database."""
    counts = {
        "pokemon": db.query(Pokemon).count(),
        "types": db.query(Type).count(),
        "pokemon_types": db.query(PokemonType).count(),
    }

    logger.info("Database counts:")
    logger.info("   Pokemon: {}", counts["pokemon"])
    logger.info("   Types: {}", counts["types"])
    logger.info("   Pokemon-Type relations: {}", counts["pokemon_types"])

    sample = (
        db.query(Pokemon)
        .options(selectinload(Pokemon.types).selectinload(PokemonType.type))
        .order_by(Pokemon.pokedex_id.asc())
        .limit(sample_size)
        .all()
    )
    if sample:
        logger.info("Sample Pokemon with types:")
        for pokemon in sample:
            logger.info("   {}", format_entry(pokemon))

    with_sprite = db.query(Pokemon).filter(Pokemon.sprite_url.is_not(None)).first()
    if with_sprite:
        logger.info("Sprite URLs present: {}", with_sprite.sprite_url)
    else:
        logger.warning("No sprite URLs stored")

    with_description = db.query(Pokemon).filter(Pokemon.description.is_not(None)).first()
    if with_description:
        logger.info('Descriptions present: "{}..."', with_description.description[:50])
    else:
        logger.warning("No descriptions stored")

    return counts
