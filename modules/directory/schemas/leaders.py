"""
Leadership Aggregation Schemas.

Nested branch -> body -> group -> leader payload of GET /api/leaders.
Field names follow the wire format consumed by the legacy front end.
"""

from pydantic import BaseModel, ConfigDict, Field


class LeaderSchema(BaseModel):
    """Leader entry; title and education are newline-joined lists."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    chinese_name: str = Field(default="", alias="chineseName")
    title: str = ""
    image: str = ""
    hometown: str = ""
    education: str = ""
    generation: str = ""
    visible: bool = True


class LeadershipGroup(BaseModel):
    """A LeadershipCategory: the leaders of one group inside a body."""

    id: str
    name: str
    type: str
    leaders: list[LeaderSchema] = Field(default_factory=list)


class LeadershipBody(BaseModel):
    id: str
    name: str
    groups: list[LeadershipGroup] = Field(default_factory=list)


class LeadershipBranch(BaseModel):
    id: str
    name: str
    type: str
    bodies: list[LeadershipBody] = Field(default_factory=list)
