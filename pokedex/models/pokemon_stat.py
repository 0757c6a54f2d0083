# pokedex/models/pokemon_stat.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base


class PokemonStat(Base):
    __tablename__ = "pokemon_stats"
    __table_args__ = (
        UniqueConstraint("pokemon_id", "stat_id", name="uq_pokemon_stats_pokemon_stat"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"), index=True, nullable=False
    )
    pokemon: Mapped["Pokemon"] = relationship(back_populates="stats")

    stat_id: Mapped[int] = mapped_column(ForeignKey("stats.id"), index=True, nullable=False)
    stat: Mapped["Stat"] = relationship()

    base_stat: Mapped[int] = mapped_column(Integer, nullable=False)
    effort: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # EV yield
