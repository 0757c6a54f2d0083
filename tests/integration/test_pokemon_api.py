"""Integration tests for the read-only HTTP API."""

import math

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from pokedex.database import get_db, get_or_create
from pokedex.main import app
from pokedex.models import (
    Ability,
    Move,
    Pokemon,
    PokemonAbility,
    PokemonMove,
    PokemonStat,
    PokemonType,
    Stat,
    Type,
)
from pokedex.models.stat import CANONICAL_STATS

# (dex id, name, [types by slot])
ROSTER = [
    (1, "bulbasaur", ["grass", "poison"]),
    (2, "ivysaur", ["grass", "poison"]),
    (4, "charmander", ["fire"]),
    (6, "charizard", ["fire", "flying"]),
    (7, "squirtle", ["water"]),
    (25, "pikachu", ["electric"]),
    (26, "raichu", ["electric"]),
    (122, "mr. mime", ["psychic", "fairy"]),
]


def _add_pokemon(db, dex_id, name, type_names):
    pokemon, _ = get_or_create(
        db, Pokemon,
        defaults={"name": name, "slug": name.replace(". ", "--"), "height": 0.4, "weight": 6.0,
                  "base_exp": 100, "capture_rate": 190, "generation": 1},
        pokedex_id=dex_id,
    )
    # insert secondary first so ordering comes from slot, not insertion
    for slot, type_name in reversed(list(enumerate(type_names, start=1))):
        type_row, _ = get_or_create(db, Type, name=type_name)
        db.add(PokemonType(pokemon_id=pokemon.id, type_id=type_row.id, slot=slot))
    return pokemon


@pytest.fixture
def seeded(db):
    for dex_id, name, types in ROSTER:
        _add_pokemon(db, dex_id, name, types)
    db.flush()

    pikachu = db.query(Pokemon).filter(Pokemon.pokedex_id == 25).one()
    for i, stat_name in enumerate(CANONICAL_STATS):
        stat, _ = get_or_create(db, Stat, name=stat_name)
        db.add(PokemonStat(pokemon_id=pikachu.id, stat_id=stat.id, base_stat=35 + i, effort=2 if stat_name == "speed" else 0))

    static, _ = get_or_create(db, Ability, defaults={"description": "May paralyze on contact."}, name="static")
    rod, _ = get_or_create(db, Ability, defaults={"description": "Draws in electric moves.", "is_hidden": True},
                           name="lightning-rod")
    db.add(PokemonAbility(pokemon_id=pikachu.id, ability_id=rod.id, slot=3, is_hidden=True))
    db.add(PokemonAbility(pokemon_id=pikachu.id, ability_id=static.id, slot=1, is_hidden=False))

    electric = db.query(Type).filter(Type.name == "electric").one()
    # 25 level-up moves + one machine move and one level 101 oddity that must be filtered out
    for i in range(25):
        move, _ = get_or_create(
            db, Move, defaults={"category": "special", "power": 40, "accuracy": 100, "pp": 30, "type_id": electric.id},
            name=f"move-{i:02d}",
        )
        db.add(PokemonMove(pokemon_id=pikachu.id, move_id=move.id, learn_method="level-up", level_learned=i % 5 + 1))
    tm, _ = get_or_create(db, Move, defaults={"category": "status", "pp": 10, "type_id": electric.id}, name="aaa-tm")
    db.add(PokemonMove(pokemon_id=pikachu.id, move_id=tm.id, learn_method="machine", level_learned=None))
    late, _ = get_or_create(db, Move, defaults={"category": "status", "pp": 10, "type_id": electric.id}, name="aaa-late")
    db.add(PokemonMove(pokemon_id=pikachu.id, move_id=late.id, learn_method="level-up", level_learned=101))

    db.commit()
    return db


class TestListPokemon:
    def test_default_page(self, client, seeded):
        resp = client.get("/api/pokemon")
        assert resp.status_code == 200

        body = resp.json()
        assert body["pagination"] == {"page": 1, "limit": 20, "total": len(ROSTER), "totalPages": 1}
        assert [p["pokedexId"] for p in body["pokemon"]] == [r[0] for r in ROSTER]

    @pytest.mark.parametrize("page,limit", [(1, 1), (1, 3), (2, 3), (3, 3), (4, 3), (1, 100)])
    def test_page_size_and_total_pages(self, client, seeded, page, limit):
        body = client.get("/api/pokemon", params={"page": page, "limit": limit}).json()

        total = body["pagination"]["total"]
        assert len(body["pokemon"]) <= limit
        assert body["pagination"]["totalPages"] == math.ceil(total / limit)

    def test_second_page_continues_ordering(self, client, seeded):
        body = client.get("/api/pokemon", params={"page": 2, "limit": 3}).json()
        assert [p["pokedexId"] for p in body["pokemon"]] == [6, 7, 25]

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"page": 0}, {"page": -1}])
    def test_invalid_pagination(self, client, seeded, params):
        resp = client.get("/api/pokemon", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid pagination parameters"}

    def test_non_numeric_pagination(self, client, seeded):
        assert client.get("/api/pokemon", params={"page": "abc"}).status_code == 400

    @pytest.mark.parametrize("page", [4, 10**6, 10**19])
    def test_page_past_the_end_is_empty(self, client, seeded, page):
        resp = client.get("/api/pokemon", params={"page": page, "limit": 3})
        assert resp.status_code == 200

        body = resp.json()
        assert body["pokemon"] == []
        assert body["pagination"] == {"page": page, "limit": 3, "total": len(ROSTER), "totalPages": 3}

    def test_search_is_case_insensitive_substring(self, client, seeded):
        body = client.get("/api/pokemon", params={"search": "SAUR"}).json()
        assert [p["name"] for p in body["pokemon"]] == ["bulbasaur", "ivysaur"]

    def test_search_matches_exact_dex_number(self, client, seeded):
        body = client.get("/api/pokemon", params={"search": "25"}).json()
        assert [p["name"] for p in body["pokemon"]] == ["pikachu"]

    @pytest.mark.parametrize("search", ["9" * 20, "9" * 5000])
    def test_oversized_numeric_search_is_empty(self, client, seeded, search):
        resp = client.get("/api/pokemon", params={"search": search})
        assert resp.status_code == 200
        assert resp.json()["pokemon"] == []

    def test_long_search_and_type_are_accepted(self, client, seeded):
        resp = client.get("/api/pokemon", params={"search": "x" * 65, "type": "y" * 33})
        assert resp.status_code == 200
        assert resp.json()["pagination"]["total"] == 0

    def test_search_escapes_like_wildcards(self, client, seeded):
        body = client.get("/api/pokemon", params={"search": "%"}).json()
        assert body["pokemon"] == []
        body = client.get("/api/pokemon", params={"search": "mr."}).json()
        assert [p["name"] for p in body["pokemon"]] == ["mr. mime"]

    def test_filter_by_type(self, client, seeded):
        body = client.get("/api/pokemon", params={"type": "fire"}).json()
        assert [p["name"] for p in body["pokemon"]] == ["charmander", "charizard"]
        assert body["pagination"]["total"] == 2

    def test_filter_by_secondary_type_and_search(self, client, seeded):
        body = client.get("/api/pokemon", params={"type": "poison", "search": "ivy"}).json()
        assert [p["name"] for p in body["pokemon"]] == ["ivysaur"]

    def test_unknown_type_is_empty(self, client, seeded):
        body = client.get("/api/pokemon", params={"type": "shadow"}).json()
        assert body["pokemon"] == []
        assert body["pagination"]["totalPages"] == 0

    def test_types_ordered_by_slot(self, client, seeded):
        body = client.get("/api/pokemon", params={"search": "charizard"}).json()
        (charizard,) = body["pokemon"]
        assert [(t["slot"], t["type"]["name"]) for t in charizard["types"]] == [(1, "fire"), (2, "flying")]


class TestPokemonDetail:
    def test_pikachu(self, client, seeded):
        resp = client.get("/api/pokemon/25")
        assert resp.status_code == 200

        body = resp.json()
        assert body["name"] == "pikachu"
        assert body["pokedexId"] == 25
        assert body["height"] == pytest.approx(0.4)
        assert [t["slot"] for t in body["types"]] == [1]
        assert [s["stat"]["name"] for s in body["stats"]] == list(CANONICAL_STATS)
        assert body["stats"][-1]["effort"] == 2

    def test_types_ordered_by_slot(self, client, seeded):
        body = client.get("/api/pokemon/1").json()
        assert [(t["slot"], t["type"]["name"]) for t in body["types"]] == [(1, "grass"), (2, "poison")]

    def test_abilities_ordered_by_slot(self, client, seeded):
        body = client.get("/api/pokemon/25").json()
        assert [(a["slot"], a["ability"]["name"], a["isHidden"]) for a in body["abilities"]] == [
            (1, "static", False),
            (3, "lightning-rod", True),
        ]

    def test_moves_limited_and_ordered(self, client, seeded):
        moves = client.get("/api/pokemon/25").json()["moves"]

        assert len(moves) == 20
        keys = [(m["level"], m["move"]["name"]) for m in moves]
        assert keys == sorted(keys)
        names = {m["move"]["name"] for m in moves}
        assert "aaa-tm" not in names and "aaa-late" not in names
        assert all(m["learnMethod"] == {"id": 1, "name": "level-up"} for m in moves)

    def test_move_type_is_type_id_string(self, client, seeded):
        move = client.get("/api/pokemon/25").json()["moves"][0]["move"]
        assert move["type"].isdigit()

    def test_not_found(self, client, seeded):
        resp = client.get("/api/pokemon/99999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Pokemon not found"}

    @pytest.mark.parametrize("big_id", ["99999999999999999999", "9223372036854775808", "9" * 5000])
    def test_oversized_id_is_not_found(self, client, seeded, big_id):
        resp = client.get(f"/api/pokemon/{big_id}")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Pokemon not found"}

    @pytest.mark.parametrize("bad_id", ["0", "-3", "abc"])
    def test_invalid_id(self, client, seeded, bad_id):
        resp = client.get(f"/api/pokemon/{bad_id}")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid Pokemon ID"}


class TestErrors:
    def test_database_error_is_generic_500(self, client, seeded):
        class BrokenSession:
            def query(self, *args, **kwargs):
                raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

            def close(self):
                pass

        def broken_db():
            yield BrokenSession()

        app.dependency_overrides[get_db] = broken_db

        resp = client.get("/api/pokemon")

        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
        assert "disk" not in resp.text

    def test_unexpected_error_is_generic_500_and_reraised(self, client, seeded):
        class ExplodingSession:
            def query(self, *args, **kwargs):
                raise RuntimeError("secret state")

            def close(self):
                pass

        def exploding_db():
            yield ExplodingSession()

        app.dependency_overrides[get_db] = exploding_db

        # the server still sees the exception after the 500 is sent
        with pytest.raises(RuntimeError):
            client.get("/api/pokemon")

        with TestClient(app, raise_server_exceptions=False) as quiet_client:
            resp = quiet_client.get("/api/pokemon")

        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
        assert "secret" not in resp.text

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
