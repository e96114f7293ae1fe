"""Directory module services."""

from modules.directory.services.client import (
    DirectoryClient,
    DirectoryClientDep,
    DirectoryFetchError,
    DirectorySnapshot,
    get_directory_client,
)
from modules.directory.services.directory import DirectoryService, get_directory_service
from modules.directory.services.facets import compute_facets, sort_facet_values
from modules.directory.services.hierarchy import build_hierarchy, build_leader_view
from modules.directory.services.leadership import (
    LeadershipService,
    build_leadership_tree,
    get_leadership_service,
    slugify,
)

__all__ = [
    "DirectoryClient",
    "DirectoryClientDep",
    "DirectoryFetchError",
    "DirectorySnapshot",
    "get_directory_client",
    "DirectoryService",
    "get_directory_service",
    "compute_facets",
    "sort_facet_values",
    "build_hierarchy",
    "build_leader_view",
    "LeadershipService",
    "build_leadership_tree",
    "get_leadership_service",
    "slugify",
]
