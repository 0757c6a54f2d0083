# pokedex/config.py
from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = PROJECT_ROOT / "data"

DB_PATH = DATA_DIR / "pokedex.db"
DEFAULT_DATABASE_URL = f"sqlite:///{DB_PATH.as_posix()}"

DATABASE_URL: str = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

# Only create the data dir when we actually use the bundled SQLite file
if DATABASE_URL == DEFAULT_DATABASE_URL:
    DATA_DIR.mkdir(parents=True, exist_ok=True)

# PokeAPI seeding
POKEAPI_BASE_URL: str = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
POKEAPI_RATE_LIMIT_DELAY: int = int(os.getenv("POKEAPI_RATE_LIMIT_DELAY", "100"))  # ms
SEED_POKEMON_COUNT: int = int(os.getenv("SEED_POKEMON_COUNT", "151"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# List endpoint pagination
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Detail endpoint move list
DETAIL_MOVE_LIMIT = 20
DETAIL_MAX_MOVE_LEVEL = 100

# Largest value SQLite (and most SQL backends) can store in an INTEGER column
MAX_DB_INTEGER = 2**63 - 1
