# pokedex/models/type_effectiveness.py
from __future__ import annotations

from sqlalchemy import CheckConstraint, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base

# Multipliers PokeAPI can express through damage_relations
ALLOWED_MULTIPLIERS = (0.0, 0.5, 1.0, 2.0)


class TypeEffectiveness(Base):
    __tablename__ = "type_effectiveness"
    __table_args__ = (
        UniqueConstraint(
            "attacking_type_id", "defending_type_id", name="uq_type_effectiveness_pair"
        ),
        CheckConstraint(
            f"multiplier IN ({', '.join(str(m) for m in ALLOWED_MULTIPLIERS)})",
            name="ck_type_effectiveness_multiplier",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    attacking_type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), index=True, nullable=False)
    attacking_type: Mapped["Type"] = relationship(foreign_keys=[attacking_type_id])

    defending_type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), index=True, nullable=False)
    defending_type: Mapped["Type"] = relationship(foreign_keys=[defending_type_id])

    multiplier: Mapped[float] = mapped_column(Float, default=1.0, nullable=False)
