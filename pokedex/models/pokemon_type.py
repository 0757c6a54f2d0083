# pokedex/models/pokemon_type.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


class PokemonType(Base):
    __tablename__ = "pokemon_types"
    __table_args__ = (
        # One type per slot: 1 = primary, 2 = secondary
        UniqueConstraint("pokemon_id", "slot", name="uq_pokemon_types_pokemon_slot"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    pokemon: Mapped["Pokemon"] = relationship(back_populates="types")

    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), index=True, nullable=False)
    type: Mapped["Type"] = relationship()

    slot: Mapped[int] = mapped_column(Integer, nullable=False)
