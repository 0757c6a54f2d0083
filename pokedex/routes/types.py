# pokedex/routes/types.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pokedex.database import get_db
from pokedex.models import Type, TypeEffectiveness
from pokedex.routes.pokemon import type_record

router = APIRouter(prefix="/api/types", tags=["types"])


@router.get("")
def list_types(db: Session = Depends(get_db)) -> dict:
    types = db.query(Type).order_by(Type.name.asc()).all()
    return {"types": [type_record(t) for t in types]}


@router.get("/{type_name}/effectiveness")
def type_effectiveness(type_name: str, db: Session = Depends(get_db)) -> dict:
    """Damage multiplier of ``type_name`` attacking every stored type (1.0 when unlisted)."""
    attacking = db.query(Type).filter(Type.name == type_name.lower()).first()
    if not attacking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Type not found")

    known = {
        row.defending_type_id: row.multiplier
        for row in db.query(TypeEffectiveness)
        .filter(TypeEffectiveness.attacking_type_id == attacking.id)
        .all()
    }
    defenders = db.query(Type).order_by(Type.name.asc()).all()

    return {
        "attacking": type_record(attacking),
        "multipliers": {t.name: known.get(t.id, 1.0) for t in defenders},
    }
