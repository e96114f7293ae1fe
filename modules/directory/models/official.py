"""
Official Model.

One row per person in the directory. Positions and degrees are stored as
JSONB documents and returned to clients unchanged.
"""

from typing import Any

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from core.database.base import Base


class Official(Base):
    """
    Official (leader) profile.

    Attributes:
        id: Numeric identifier referenced by Body.members.
        name_en: English name.
        name_cn: Chinese name.
        age: Age in years.
        generation: Leadership generation (e.g. 5.0).
        home_province: Province of origin.
        positions: List of titles, each a string or {"title", "institution"}.
        degrees: List of {"name", "level", "type"} documents.
    """

    __tablename__ = "officials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_cn: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    generation: Mapped[float | None] = mapped_column(Numeric(4, 1, asdecimal=False), nullable=True)
    home_province: Mapped[str | None] = mapped_column(String(255), nullable=True)
    positions: Mapped[list[Any]] = mapped_column(JSONB, nullable=False, default=list)
    degrees: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Official(id={self.id}, name_en={self.name_en})>"
