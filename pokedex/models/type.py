# pokedex/models/type.py
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pokedex.database import Base


class Type(Base):
    __tablename__ = "types"

    id: Mapped[int] = mapped_column(primary_key=True)

    # PokeAPI identifier, e.g. "fire"
    name: Mapped[str] = mapped_column(String(32), unique=True, index=True, nullable=False)

    # Display colour as hex, e.g. "#F08030"
    color: Mapped[str] = mapped_column(String(7), default="#68A090", nullable=False)
