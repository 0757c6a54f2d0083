# pokedex/models/pokemon.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


def _now_utc_naive() -> datetime:
    # Naive UTC datetime (no tzinfo). Works cleanly with SQLite.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Pokemon(Base):
    __tablename__ = "pokemon"

    id: Mapped[int] = mapped_column(primary_key=True)

    # National dex number, e.g. 25 for pikachu
    pokedex_id: Mapped[int] = mapped_column(Integer, unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Stored in metric units (PokeAPI ships decimeters / hectograms)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)

    base_exp: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    capture_rate: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # 0-255

    is_legendary: Mapped[bool] = mapped_column(Boolean, default=False, index=True, nullable=False)
    is_mythical: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    generation: Mapped[int] = mapped_column(Integer, default=1, index=True, nullable=False)  # 1-9

    sprite_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sprite_shiny_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    artwork_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now_utc_naive, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_now_utc_naive, onupdate=_now_utc_naive, nullable=False
    )

    # Junction rows belong to the pokemon; lookup rows (types, abilities, ...) are shared
    types: Mapped[list["PokemonType"]] = relationship(
        back_populates="pokemon",
        order_by="PokemonType.slot",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    abilities: Mapped[list["PokemonAbility"]] = relationship(
        back_populates="pokemon",
        order_by="PokemonAbility.slot",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    stats: Mapped[list["PokemonStat"]] = relationship(
        back_populates="pokemon",
        order_by="PokemonStat.stat_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    moves: Mapped[list["PokemonMove"]] = relationship(
        back_populates="pokemon",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    evolves_to: Mapped[list["Evolution"]] = relationship(
        foreign_keys="Evolution.from_pokemon_id",
        back_populates="from_pokemon",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    evolves_from: Mapped[list["Evolution"]] = relationship(
        foreign_keys="Evolution.to_pokemon_id",
        back_populates="to_pokemon",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
