# pokedex/routes/pokemon.py
from __future__ import annotations

import math
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Query as ORMQuery, Session, contains_eager, selectinload

from pokedex.config import (
    DEFAULT_PAGE_SIZE,
    DETAIL_MAX_MOVE_LEVEL,
    DETAIL_MOVE_LIMIT,
    MAX_DB_INTEGER,
    MAX_PAGE_SIZE,
)
from pokedex.database import get_db
from pokedex.models import (
    Move,
    Pokemon,
    PokemonAbility,
    PokemonMove,
    PokemonStat,
    PokemonType,
    Type,
)

router = APIRouter(prefix="/api/pokemon", tags=["pokemon"])


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None


def pokemon_record(p: Pokemon) -> dict[str, Any]:
    return {
        "id": p.id,
        "pokedexId": p.pokedex_id,
        "name": p.name,
        "slug": p.slug,
        "description": p.description,
        "height": p.height,
        "weight": p.weight,
        "baseExp": p.base_exp,
        "captureRate": p.capture_rate,
        "isLegendary": p.is_legendary,
        "isMythical": p.is_mythical,
        "generation": p.generation,
        "spriteURL": p.sprite_url,
        "spriteShinyURL": p.sprite_shiny_url,
        "artworkURL": p.artwork_url,
        "createdAt": _iso(p.created_at),
        "updatedAt": _iso(p.updated_at),
    }


def type_record(t: Type) -> dict[str, Any]:
    return {"id": t.id, "name": t.name, "color": t.color}


def _types(p: Pokemon) -> list[dict]:
    # relationship is ordered by slot
    return [{"slot": pt.slot, "type": type_record(pt.type)} for pt in p.types]


def _db_integer(text: str) -> int | None:
    """Decimal string -> int, or None when it is not a number an INTEGER column can hold."""
    if not text.isdecimal() or len(text) > len(str(MAX_DB_INTEGER)):
        return None
    value = int(text)
    return value if value <= MAX_DB_INTEGER else None


def filtered_pokemon(db: Session, search: str | None, type_name: str | None) -> ORMQuery:
    q = db.query(Pokemon)

    search = (search or "").strip()
    if search:
        conditions = [Pokemon.name.icontains(search, autoescape=True)]
        dex_id = _db_integer(search)
        if dex_id is not None:
            conditions.append(Pokemon.pokedex_id == dex_id)
        q = q.filter(or_(*conditions))

    type_name = (type_name or "").strip().lower()
    if type_name:
        q = q.filter(Pokemon.types.any(PokemonType.type.has(Type.name == type_name)))

    return q


@router.get("")
def list_pokemon(
    page: int = Query(1),
    limit: int = Query(DEFAULT_PAGE_SIZE),
    search: str | None = Query(None),
    type_name: str | None = Query(None, alias="type"),
    db: Session = Depends(get_db),
) -> dict:
    if page < 1 or limit < 1 or limit > MAX_PAGE_SIZE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid pagination parameters")

    q = filtered_pokemon(db, search, type_name)
    total = q.count()

    offset = (page - 1) * limit
    if offset >= total:
        # past the last page
        rows = []
    else:
        rows = (
            q.options(selectinload(Pokemon.types).selectinload(PokemonType.type))
            .order_by(Pokemon.pokedex_id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    return {
        "pokemon": [{**pokemon_record(p), "types": _types(p)} for p in rows],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    }


def _detail_moves(db: Session, pokemon_id: int) -> list[PokemonMove]:
    return (
        db.query(PokemonMove)
        .join(PokemonMove.move)
        .options(contains_eager(PokemonMove.move))
        .filter(
            PokemonMove.pokemon_id == pokemon_id,
            PokemonMove.level_learned <= DETAIL_MAX_MOVE_LEVEL,
        )
        .order_by(PokemonMove.level_learned.asc(), Move.name.asc())
        .limit(DETAIL_MOVE_LIMIT)
        .all()
    )


@router.get("/{pokemon_id}")
def get_pokemon(pokemon_id: str, db: Session = Depends(get_db)) -> dict:
    raw_id = pokemon_id.strip()
    digits = raw_id.lstrip("0")
    if not raw_id.isdecimal() or not digits:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Pokemon ID")

    dex_id = _db_integer(digits)
    if dex_id is None:
        # positive but larger than any stored id
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pokemon not found")

    p = (
        db.query(Pokemon)
        .options(
            selectinload(Pokemon.types).selectinload(PokemonType.type),
            selectinload(Pokemon.stats).selectinload(PokemonStat.stat),
            selectinload(Pokemon.abilities).selectinload(PokemonAbility.ability),
        )
        .filter(Pokemon.pokedex_id == dex_id)
        .first()
    )
    if not p:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pokemon not found")

    moves = _detail_moves(db, p.id)

    return {
        **pokemon_record(p),
        "types": _types(p),
        "stats": [
            {
                "stat": {"name": ps.stat.name, "baseStat": ps.base_stat, "effort": ps.effort},
                "baseStat": ps.base_stat,
                "effort": ps.effort,
            }
            for ps in p.stats
        ],
        "abilities": [
            {
                "ability": {
                    "id": pa.ability.id,
                    "name": pa.ability.name,
                    "description": pa.ability.description,
                    "effect": pa.ability.effect,
                    "isHidden": pa.ability.is_hidden,
                },
                "isHidden": pa.is_hidden,
                "slot": pa.slot,
            }
            for pa in p.abilities
        ],
        "moves": [
            {
                "move": {
                    "id": pm.move.id,
                    "name": pm.move.name,
                    # NOTE: this is the type id, not the type name
                    "type": str(pm.move.type_id),
                    "power": pm.move.power,
                    "accuracy": pm.move.accuracy,
                    "pp": pm.move.pp,
                },
                "level": pm.level_learned or 0,
                "learnMethod": {"id": 1, "name": pm.learn_method},
            }
            for pm in moves
        ],
    }
