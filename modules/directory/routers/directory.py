"""
Directory Data Router.

Read-only JSON endpoints for organisational bodies and officials.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from modules.directory.routers.errors import query_error_response
from modules.directory.schemas import BodySchema, ErrorResponse, OfficialSchema
from modules.directory.services import DirectoryService, get_directory_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Directory"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.get("/bodies", response_model=list[BodySchema], responses=_ERROR_RESPONSES)
async def list_bodies(
    service: Annotated[DirectoryService, Depends(get_directory_service)],
) -> list[BodySchema] | JSONResponse:
    try:
        bodies = await service.list_bodies()
        return [BodySchema.model_validate(body) for body in bodies]
    except Exception as e:
        return query_error_response(logger, "Failed to fetch bodies", e)


@router.get("/officials", response_model=list[OfficialSchema], responses=_ERROR_RESPONSES)
async def list_officials(
    service: Annotated[DirectoryService, Depends(get_directory_service)],
) -> list[OfficialSchema] | JSONResponse:
    try:
        officials = await service.list_officials()
        return [OfficialSchema.model_validate(official) for official in officials]
    except Exception as e:
        return query_error_response(logger, "Failed to fetch officials", e)
