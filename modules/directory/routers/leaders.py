"""
Leaders Router.

Serves the branch -> body -> group -> leader aggregation.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from modules.directory.routers.errors import query_error_response
from modules.directory.schemas import ErrorResponse, LeadershipBranch
from modules.directory.services import LeadershipService, get_leadership_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Leaders"])


@router.get(
    "/leaders",
    response_model=list[LeadershipBranch],
    responses={500: {"model": ErrorResponse}},
)
async def list_leaders(
    service: Annotated[LeadershipService, Depends(get_leadership_service)],
) -> list[LeadershipBranch] | JSONResponse:
    try:
        return await service.get_leadership_tree()
    except Exception as e:
        return query_error_response(logger, "Failed to fetch leaders", e, include_details=False)
