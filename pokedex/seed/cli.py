# pokedex/seed/cli.py
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from loguru import logger

from pokedex.config import POKEAPI_BASE_URL, POKEAPI_RATE_LIMIT_DELAY, SEED_POKEMON_COUNT
from pokedex.database import Base, SessionLocal, engine
from pokedex.log import configure_logging
from pokedex.seed.client import PokeAPIClient
from pokedex.seed.mapping import PREFERRED_FLAVOR_VERSION
from pokedex.seed.seeder import SeedReport, seed_evolutions, seed_pokemon, seed_stats, seed_types
from pokedex.seed.verify import verify_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokedex-seed",
        description="Populate the Pokédex database from PokeAPI",
    )
    parser.add_argument("--count", type=int, default=SEED_POKEMON_COUNT,
                        help="Seed national dex #1..COUNT")
    parser.add_argument("--base-url", default=POKEAPI_BASE_URL, help="PokeAPI base URL")
    parser.add_argument("--delay-ms", type=int, default=POKEAPI_RATE_LIMIT_DELAY,
                        help="Milliseconds slept before every request")
    parser.add_argument("--flavor-version", default=PREFERRED_FLAVOR_VERSION,
                        help="Game version whose flavor text is preferred")
    parser.add_argument("--skip-types", action="store_true", help="Don't (re)seed types")
    parser.add_argument("--skip-evolutions", action="store_true", help="Don't seed evolution chains")
    parser.add_argument("--no-create-tables", action="store_true",
                        help="Assume Alembic already created the schema")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


async def run_seed(args: argparse.Namespace, client: Optional[PokeAPIClient] = None) -> SeedReport:
    client = client or PokeAPIClient(base_url=args.base_url, delay_ms=args.delay_ms)

    db = SessionLocal()
    try:
        async with client:
            if not args.skip_types:
                await seed_types(db, client)
            seed_stats(db)

            report = await seed_pokemon(db, client, args.count, args.flavor_version)

            if not args.skip_evolutions:
                await seed_evolutions(db, client, report.evolution_chains)

        verify_data(db)
        return report
    finally:
        db.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if not args.no_create_tables:
        Base.metadata.create_all(bind=engine)

    logger.info("Starting database seeding...")
    try:
        asyncio.run(run_seed(args))
    except Exception:
        logger.exception("Error during seeding")
        return 1

    logger.info("Database seeding completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
