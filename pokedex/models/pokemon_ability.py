# pokedex/models/pokemon_ability.py
from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


class PokemonAbility(Base):
    __tablename__ = "pokemon_abilities"
    __table_args__ = (
        UniqueConstraint("pokemon_id", "slot", name="uq_pokemon_abilities_pokemon_slot"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    pokemon: Mapped["Pokemon"] = relationship(back_populates="abilities")

    ability_id: Mapped[int] = mapped_column(ForeignKey("abilities.id"), index=True, nullable=False)
    ability: Mapped["Ability"] = relationship()

    slot: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-3, slot 3 is the hidden one
    is_hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
