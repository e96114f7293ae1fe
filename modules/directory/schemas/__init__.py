"""Directory module schemas."""

from modules.directory.schemas.directory import (
    BodySchema,
    Degree,
    ErrorResponse,
    MemberRef,
    OfficialSchema,
)
from modules.directory.schemas.explorer import (
    UNKNOWN,
    BodyNode,
    ExplorerFilters,
    FacetOption,
    Facets,
    HierarchyView,
    LeaderView,
)
from modules.directory.schemas.leaders import (
    LeaderSchema,
    LeadershipBody,
    LeadershipBranch,
    LeadershipGroup,
)

__all__ = [
    "BodySchema",
    "Degree",
    "ErrorResponse",
    "MemberRef",
    "OfficialSchema",
    "UNKNOWN",
    "BodyNode",
    "ExplorerFilters",
    "FacetOption",
    "Facets",
    "HierarchyView",
    "LeaderView",
    "LeaderSchema",
    "LeadershipBody",
    "LeadershipBranch",
    "LeadershipGroup",
]
