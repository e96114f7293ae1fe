"""Directory module HTML views."""

from modules.directory.views.explorer_page import (
    EXPLORER_PATH,
    LOAD_ERROR_MESSAGE,
    explorer_url,
    render_error_page,
    render_explorer_page,
)

__all__ = [
    "EXPLORER_PATH",
    "LOAD_ERROR_MESSAGE",
    "explorer_url",
    "render_error_page",
    "render_explorer_page",
]
