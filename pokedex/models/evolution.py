# pokedex/models/evolution.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


class Evolution(Base):
    __tablename__ = "evolutions"
    __table_args__ = (
        UniqueConstraint("from_pokemon_id", "to_pokemon_id", name="uq_evolutions_pair"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    from_pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    from_pokemon: Mapped["Pokemon"] = relationship(
        foreign_keys=[from_pokemon_id], back_populates="evolves_to"
    )

    to_pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    to_pokemon: Mapped["Pokemon"] = relationship(
        foreign_keys=[to_pokemon_id], back_populates="evolves_from"
    )

    # "level-up", "use-item", "trade", ...
    trigger: Mapped[str] = mapped_column(String(32), nullable=False)

    min_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    item: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(64), nullable=True)
    time_of_day: Mapped[str | None] = mapped_column(String(16), nullable=True)

    # Anything else PokeAPI attaches (min_happiness=220, known_move=..., ...)
    condition: Mapped[str | None] = mapped_column(String(255), nullable=True)
