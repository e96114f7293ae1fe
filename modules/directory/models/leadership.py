"""
Legacy Leadership Models.

Normalised tables read by the /api/leaders aggregation. A person is keyed
by English name; groups, positions and education rows reference it.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.database.base import Base


class Person(Base):
    __tablename__ = "people"

    name_en: Mapped[str] = mapped_column(String(255), primary_key=True)
    name_cn: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    generation: Mapped[str | None] = mapped_column(String(32), nullable=True)
    hometown: Mapped[str | None] = mapped_column(String(255), nullable=True)


class GroupMembership(Base):
    """Membership of a person in a branch / body / group."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_en: Mapped[str] = mapped_column(ForeignKey("people.name_en"), index=True)
    branch: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(String(255), nullable=False)
    group_name: Mapped[str] = mapped_column(String(255), nullable=False)


class Position(Base):
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_en: Mapped[str] = mapped_column(ForeignKey("people.name_en"), index=True)
    position: Mapped[str] = mapped_column(String(512), nullable=False)


class Education(Base):
    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_en: Mapped[str] = mapped_column(ForeignKey("people.name_en"), index=True)
    degree: Mapped[str] = mapped_column(String(512), nullable=False)
