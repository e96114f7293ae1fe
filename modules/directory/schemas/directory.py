"""
Directory Schemas.

Pydantic models for the /api/bodies and /api/officials payloads. The same
models parse those payloads on the explorer side (DirectoryClient).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Degree(BaseModel):
    """A single degree held by an official. Any field may be missing."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str | None = None
    level: str | None = None
    type: str | None = None


class MemberRef(BaseModel):
    """
    Reference from a body to an official, with the role held in that body.

    ``id`` is kept even when it names no official (missing, or not an
    integer); such members are skipped when the hierarchy is built.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: int | str | None = None
    title: str | None = None


class BodySchema(BaseModel):
    """Organisational body as returned by GET /api/bodies."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = ""
    members: list[MemberRef] = Field(default_factory=list)
    parent: int | None = None
    caption: str | None = None
    order: int | None = None


class OfficialSchema(BaseModel):
    """Official profile as returned by GET /api/officials."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name_en: str = ""
    name_cn: str | None = None
    age: int | None = None
    generation: float | None = None
    home_province: str | None = None
    positions: list[str | dict[str, Any]] = Field(
        default_factory=list,
        description="Titles, either plain strings or {title, institution} objects",
    )
    degrees: list[Degree] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned with HTTP 500."""

    error: str
    details: str | None = None
