"""Application kernel: config, logging, module registry, database and HTTP plumbing."""
from core import database
from core.app_context import AppContext, ConfigLoader
from core.dependencies import HttpClientDep, get_http_client
from core.interface import IAppModule
from core.logging_config import setup_logging
from core.registry import ModuleLoader, ModuleRegistry
from core.server import create_base_app

__all__ = [
    "AppContext",
    "ConfigLoader",
    "HttpClientDep",
    "IAppModule",
    "ModuleLoader",
    "ModuleRegistry",
    "create_base_app",
    "database",
    "get_http_client",
    "setup_logging",
]
