# pokedex/models/move.py
from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pokedex.database import Base

MOVE_CATEGORIES = ("physical", "special", "status")


class Move(Base):
    __tablename__ = "moves"
    __table_args__ = (
        CheckConstraint(
            f"category IN ({', '.join(repr(c) for c in MOVE_CATEGORIES)})",
            name="ck_moves_category",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)

    # "physical" / "special" / "status"
    category: Mapped[str] = mapped_column(String(16), nullable=False)

    # Status moves have no power, some moves never miss
    power: Mapped[int | None] = mapped_column(Integer, nullable=True)
    accuracy: Mapped[int | None] = mapped_column(Integer, nullable=True)

    pp: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), index=True, nullable=False)
    type: Mapped["Type"] = relationship()
