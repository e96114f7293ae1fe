"""
Body Model.

Organisational units (party, state council, committees...). Bodies form a
tree through the nullable ``parent`` column.
"""

from typing import Any

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from core.database.base import Base


class Body(Base):
    """
    Organisational body.

    Attributes:
        id: Numeric identifier.
        name: Display name.
        members: Ordered list of {"id": official id, "title": role or null}.
        parent: Parent body id, or None for a top-level body.
        caption: Short description shown under the name.
        order: Display order among siblings (nulls last).
    """

    __tablename__ = "bodies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    members: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)
    parent: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("bodies.id"),
        nullable=True,
        index=True,
    )
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int | None] = mapped_column("order", Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Body(id={self.id}, name={self.name}, parent={self.parent})>"
