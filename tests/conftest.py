"""Pytest configuration and shared fixtures for the Pokédex tests."""

import os

# Must be set before pokedex.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("POKEAPI_RATE_LIMIT_DELAY", "0")

from typing import Any, Dict, Set

import httpx
import pytest
from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pokedex.database import Base, get_db
from pokedex.main import app
from pokedex.seed.client import PokeAPIClient

FAKE_BASE_URL = "https://pokeapi.test/api/v2"


# ====================
# Database Fixtures
# ====================

@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    """FastAPI TestClient whose get_db dependency uses the test engine."""
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ====================
# Logging Fixtures
# ====================

@pytest.fixture
def log_messages():
    """Collect loguru records (WARNING and up) as plain strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="WARNING")
    yield messages
    logger.remove(handler_id)


# ====================
# Fake PokeAPI
# ====================

def _ref(kind: str, name: Any) -> Dict[str, str]:
    return {"name": str(name), "url": f"{FAKE_BASE_URL}/{kind}/{name}/"}


class FakePokeAPI:
    """
    Minimal in-memory PokeAPI served through httpx.MockTransport.

    Pokemon #n is called "mon-n", is grass/poison for odd n and plain grass
    for even n, and everything from #1 to #3 shares one evolution chain.
    """

    def __init__(self, size: int = 10):
        self.size = size
        self.fail: Set[int] = set()
        self.requests: list[str] = []

    # --- payloads -------------------------------------------------------

    def pokemon(self, n: int) -> dict:
        types = [{"slot": 1, "type": _ref("type", "grass")}]
        if n % 2:
            types.append({"slot": 2, "type": _ref("type", "poison")})
        return {
            "id": n,
            "name": f"mon-{n}",
            "height": 4,
            "weight": 60,
            "base_experience": 64,
            "species": _ref("pokemon-species", n),
            "types": types,
            "abilities": [
                {"ability": _ref("ability", "overgrow"), "is_hidden": False, "slot": 1},
                {"ability": _ref("ability", "chlorophyll"), "is_hidden": True, "slot": 3},
            ],
            "stats": [
                {"base_stat": 45 + n, "effort": 1 if name == "hp" else 0, "stat": _ref("stat", name)}
                for name in ("hp", "attack", "defense", "special-attack", "special-defense", "speed")
            ],
            "moves": [
                {
                    "move": _ref("move", "tackle"),
                    "version_group_details": [
                        {"level_learned_at": 1, "move_learn_method": {"name": "level-up"},
                         "version_group": {"name": "red-blue"}},
                    ],
                },
                {
                    "move": _ref("move", "vine-whip"),
                    "version_group_details": [
                        {"level_learned_at": 13, "move_learn_method": {"name": "level-up"},
                         "version_group": {"name": "red-blue"}},
                        {"level_learned_at": 0, "move_learn_method": {"name": "machine"},
                         "version_group": {"name": "red-blue"}},
                    ],
                },
                {
                    "move": _ref("move", "growl"),
                    "version_group_details": [
                        {"level_learned_at": 1, "move_learn_method": {"name": "level-up"},
                         "version_group": {"name": "red-blue"}},
                    ],
                },
            ],
            "sprites": {
                "front_default": f"https://img.test/{n}.png",
                "front_shiny": f"https://img.test/shiny/{n}.png",
                "other": {"official-artwork": {"front_default": f"https://img.test/art/{n}.png"}},
            },
        }

    def species(self, n: int) -> dict:
        return {
            "id": n,
            "name": f"mon-{n}",
            "capture_rate": 45,
            "is_legendary": n == 10,
            "is_mythical": False,
            "generation": {"name": "generation-i"},
            "flavor_text_entries": [
                {"flavor_text": "Texte\nfrançais.", "language": {"name": "fr"}, "version": {"name": "red"}},
                {"flavor_text": "A strange seed was\nplanted on its\fback.",
                 "language": {"name": "en"}, "version": {"name": "red"}},
            ],
            "evolution_chain": {"url": f"{FAKE_BASE_URL}/evolution-chain/{1 if n <= 3 else n}/"},
        }

    def evolution_chain(self, chain_id: int) -> dict:
        if chain_id == 1:
            return {
                "id": 1,
                "chain": {
                    "species": _ref("pokemon-species", 1),
                    "evolution_details": [],
                    "evolves_to": [
                        {
                            "species": _ref("pokemon-species", 2),
                            "evolution_details": [
                                {"trigger": {"name": "level-up"}, "min_level": 16, "item": None,
                                 "location": None, "time_of_day": "", "min_happiness": None},
                            ],
                            "evolves_to": [
                                {
                                    "species": _ref("pokemon-species", 3),
                                    "evolution_details": [
                                        {"trigger": {"name": "level-up"}, "min_level": 32,
                                         "time_of_day": ""},
                                    ],
                                    "evolves_to": [],
                                }
                            ],
                        }
                    ],
                },
            }
        return {
            "id": chain_id,
            "chain": {"species": _ref("pokemon-species", chain_id), "evolution_details": [],
                      "evolves_to": []},
        }

    MOVES = {
        "tackle": {"power": 40, "accuracy": 100, "pp": 35, "damage_class": "physical", "type": "normal"},
        "vine-whip": {"power": 45, "accuracy": 100, "pp": 25, "damage_class": "physical", "type": "grass"},
        "growl": {"power": None, "accuracy": 100, "pp": 40, "damage_class": "status", "type": "normal"},
    }

    def move(self, name: str) -> dict:
        m = self.MOVES[name]
        return {
            "name": name,
            "power": m["power"],
            "accuracy": m["accuracy"],
            "pp": m["pp"],
            "priority": 0,
            "damage_class": {"name": m["damage_class"]},
            "type": _ref("type", m["type"]),
        }

    def ability(self, name: str) -> dict:
        return {
            "name": name,
            "effect_entries": [
                {"effect": f"{name} full effect.", "short_effect": f"{name} short effect.",
                 "language": {"name": "en"}},
            ],
        }

    TYPE_RELATIONS = {
        "normal": {"half_damage_to": ["rock"], "no_damage_to": ["ghost"], "double_damage_to": []},
        "grass": {"double_damage_to": ["water"], "half_damage_to": ["fire", "grass"], "no_damage_to": []},
        "poison": {"double_damage_to": ["grass"], "half_damage_to": ["poison"], "no_damage_to": []},
        "fire": {"double_damage_to": ["grass"], "half_damage_to": ["water"], "no_damage_to": []},
        "water": {"double_damage_to": ["fire"], "half_damage_to": ["grass"], "no_damage_to": []},
        "rock": {"double_damage_to": ["fire"], "half_damage_to": [], "no_damage_to": []},
        "ghost": {"double_damage_to": ["ghost"], "half_damage_to": [], "no_damage_to": ["normal"]},
    }

    def type_list(self) -> dict:
        names = list(self.TYPE_RELATIONS) + ["unknown", "shadow"]
        return {"count": len(names), "next": None, "previous": None,
                "results": [_ref("type", name) for name in names]}

    def type_detail(self, name: str) -> dict:
        relations = self.TYPE_RELATIONS[name]
        return {
            "id": list(self.TYPE_RELATIONS).index(name) + 1,
            "name": name,
            "damage_relations": {k: [_ref("type", t) for t in v] for k, v in relations.items()},
        }

    # --- transport ------------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        parts = [p for p in request.url.path.split("/") if p][2:]  # drop "api", "v2"
        kind, key = parts[0], (parts[1] if len(parts) > 1 else None)

        if kind == "pokemon" and key is not None:
            n = int(key)
            if n in self.fail:
                return httpx.Response(500, json={"detail": "boom"})
            if n > self.size:
                return httpx.Response(404, json={"detail": "Not found."})
            return httpx.Response(200, json=self.pokemon(n))
        if kind == "pokemon-species":
            return httpx.Response(200, json=self.species(int(key)))
        if kind == "evolution-chain":
            return httpx.Response(200, json=self.evolution_chain(int(key)))
        if kind == "move":
            return httpx.Response(200, json=self.move(key))
        if kind == "ability":
            return httpx.Response(200, json=self.ability(key))
        if kind == "type" and key is None:
            return httpx.Response(200, json=self.type_list())
        if kind == "type":
            return httpx.Response(200, json=self.type_detail(key))
        return httpx.Response(404, json={"detail": "Not found."})

    def count(self, fragment: str) -> int:
        return sum(1 for url in self.requests if fragment in url)


@pytest.fixture
def fake_api():
    return FakePokeAPI()


@pytest.fixture
def make_api_client(fake_api):
    """Factory for PokeAPIClient instances talking to fake_api with no delay."""

    def _make(delay_ms: int = 0) -> PokeAPIClient:
        return PokeAPIClient(
            base_url=FAKE_BASE_URL,
            delay_ms=delay_ms,
            transport=httpx.MockTransport(fake_api.handler),
        )

    return _make
