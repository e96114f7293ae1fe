"""
Explorer Page Router.

Renders the leadership explorer. Data is loaded through the JSON API on
every request; search, filters and the selected tab travel as query
parameters.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import HTMLResponse

from modules.directory.core.config import get_directory_settings
from modules.directory.schemas import ExplorerFilters
from modules.directory.services import (
    DirectoryClientDep,
    DirectoryFetchError,
    build_hierarchy,
    compute_facets,
)
from modules.directory.views import EXPLORER_PATH, render_error_page, render_explorer_page

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Explorer"])

ALL = "all"


def _facet_value(value: str) -> str:
    """"all" (and blank) clear a filter."""
    value = value.strip()
    return "" if value.lower() == ALL else value


def _parse_tab(tab: str | None) -> int | None:
    if not tab:
        return None
    try:
        return int(tab)
    except ValueError:
        return None


@router.get(EXPLORER_PATH, response_class=HTMLResponse)
async def explorer_page(
    client: DirectoryClientDep,
    q: Annotated[str, Query()] = "",
    hometown: Annotated[str, Query()] = "",
    education_level: Annotated[str, Query()] = "",
    education_type: Annotated[str, Query()] = "",
    generation: Annotated[str, Query()] = "",
    tab: Annotated[str | None, Query()] = None,
) -> HTMLResponse:
    settings = get_directory_settings()

    try:
        snapshot = await client.fetch_directory()
    except DirectoryFetchError as e:
        logger.error(f"Explorer data load failed: {e}")
        return HTMLResponse(
            content=render_error_page(settings.app_name),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    filters = ExplorerFilters(
        hometown=_facet_value(hometown),
        education_level=_facet_value(education_level),
        education_type=_facet_value(education_type),
        generation=_facet_value(generation),
    )
    hierarchy = build_hierarchy(snapshot.bodies, snapshot.officials, q, filters)
    facets = compute_facets(snapshot.officials)

    return HTMLResponse(
        content=render_explorer_page(
            settings.app_name,
            hierarchy,
            facets,
            filters,
            search_query=q,
            active_tab=_parse_tab(tab),
        )
    )
