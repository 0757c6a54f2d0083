# pokedex/models/ability.py
from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pokedex.database import Base


class Ability(Base):
    __tablename__ = "abilities"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    effect: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Taken from the first pokemon that introduced the ability during seeding
    is_hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
