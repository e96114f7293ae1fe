"""Directory module models."""

from modules.directory.models.body import Body
from modules.directory.models.leadership import Education, GroupMembership, Person, Position
from modules.directory.models.official import Official

__all__ = [
    "Body",
    "Official",
    "Person",
    "GroupMembership",
    "Position",
    "Education",
]
