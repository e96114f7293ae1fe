"""
Directory API Client.

Client data layer of the explorer: loads the bodies and officials payloads
from the JSON API in parallel, once per page render.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Annotated

import httpx
from fastapi import Depends, Request

from core.dependencies import HttpClientDep
from modules.directory.core.config import get_directory_settings
from modules.directory.schemas import BodySchema, OfficialSchema

logger = logging.getLogger(__name__)

BODIES_PATH = "/api/bodies"
OFFICIALS_PATH = "/api/officials"


class DirectoryFetchError(Exception):
    """Raised when either directory payload cannot be loaded."""
    pass


@dataclass
class DirectorySnapshot:
    """Bodies and officials as loaded for a single page render."""

    bodies: list[BodySchema] = field(default_factory=list)
    officials: list[OfficialSchema] = field(default_factory=list)


class DirectoryClient:
    """
    Fetches the directory payloads over HTTP.

    Both requests are issued concurrently and awaited together. There is no
    retry: any failure surfaces as DirectoryFetchError.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")

    async def fetch_directory(self) -> DirectorySnapshot:
        """
        Load bodies and officials.

        Raises:
            DirectoryFetchError: If a request fails, returns a non-2xx status
                or the payload does not parse.
        """
        logger.debug(f"Fetching directory data from {self._base_url}")
        # Both requests run to completion even when one of them fails
        results = await asyncio.gather(
            self._http_client.get(f"{self._base_url}{BODIES_PATH}"),
            self._http_client.get(f"{self._base_url}{OFFICIALS_PATH}"),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, BaseException)]
        for error in errors:
            if not isinstance(error, httpx.HTTPError):
                raise error
        if errors:
            logger.error(f"Error fetching directory data: {'; '.join(str(e) for e in errors)}")
            raise DirectoryFetchError("Failed to fetch data") from errors[0]

        bodies_response, officials_response = results
        if not bodies_response.is_success or not officials_response.is_success:
            logger.error(
                f"API Error: bodies={bodies_response.status_code} {bodies_response.text!r}, "
                f"officials={officials_response.status_code} {officials_response.text!r}"
            )
            raise DirectoryFetchError("Failed to fetch data")

        try:
            bodies = [BodySchema.model_validate(item) for item in bodies_response.json()]
            officials = [
                OfficialSchema.model_validate(item) for item in officials_response.json()
            ]
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed directory payload: {e}")
            raise DirectoryFetchError("Failed to fetch data") from e

        logger.info(f"Received {len(bodies)} bodies and {len(officials)} officials")
        return DirectorySnapshot(bodies=bodies, officials=officials)


def get_directory_client(request: Request, http_client: HttpClientDep) -> DirectoryClient:
    """
    FastAPI dependency building a client on the shared httpx.AsyncClient.

    Without DIRECTORY_API_BASE_URL the API is read from the origin serving
    the current request.
    """
    base_url = get_directory_settings().api_base_url or str(request.base_url)
    return DirectoryClient(http_client, base_url)


DirectoryClientDep = Annotated[DirectoryClient, Depends(get_directory_client)]
