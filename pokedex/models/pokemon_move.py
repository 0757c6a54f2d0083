# pokedex/models/pokemon_move.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


class PokemonMove(Base):
    __tablename__ = "pokemon_moves"
    __table_args__ = (
        UniqueConstraint(
            "pokemon_id", "move_id", "learn_method", name="uq_pokemon_moves_pokemon_move_method"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    pokemon: Mapped["Pokemon"] = relationship(back_populates="moves")

    move_id: Mapped[int] = mapped_column(ForeignKey("moves.id"), index=True, nullable=False)
    move: Mapped["Move"] = relationship()

    # e.g. "level-up", "machine", "egg", "tutor"
    learn_method: Mapped[str] = mapped_column(String(32), nullable=False)

    # Only set for level-up moves
    level_learned: Mapped[int | None] = mapped_column(Integer, nullable=True)
