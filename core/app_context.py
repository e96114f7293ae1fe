"""
Process-wide configuration and runtime state.

``ConfigLoader`` reads the environment (after an optional ``.env``) into a
nested dict addressed with dotted keys such as ``server.port``.
``AppContext`` bundles that config with the startup event trail shown by
``/api/status``.
"""
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


def _lower(raw: str) -> str:
    return raw.strip().lower()


# dotted key -> (environment variable, default, converter)
ENV_SETTINGS: Dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "server.host": ("SERVER_HOST", "127.0.0.1", str),
    "server.port": ("SERVER_PORT", "8000", int),
    "server.base_url": ("BASE_URL", "", str),
    "app.debug": ("APP_DEBUG", "true", _as_bool),
    "app.log_level": ("APP_LOG_LEVEL", "INFO", str),
    "database.url": ("DATABASE_URL", "", str),
    "database.ssl_mode": ("DATABASE_SSL_MODE", "require", _lower),
}


@dataclass
class ConfigLoader:
    """Environment-backed settings addressed by dotted keys."""

    _config: Dict[str, Any] = field(default_factory=dict)

    def load(self, env_path: Optional[str] = None) -> None:
        """Read ``env_path`` (or the project ``.env`` when present), then the environment."""
        dotenv_file = Path(env_path) if env_path else Path(__file__).parent.parent / ".env"
        if dotenv_file.exists():
            load_dotenv(dotenv_file)

        config: Dict[str, Any] = {}
        for key, (env_name, default, convert) in ENV_SETTINGS.items():
            section, name = key.split(".", 1)
            config.setdefault(section, {})[name] = convert(os.getenv(env_name, default))
        self._config = config

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node


class AppContext:
    """
    Shared state handed to every module's ``on_entry``.

    Holds the loaded configuration, a bounded trail of lifecycle events
    and whether the HTTP server is currently serving.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._config_loader = ConfigLoader()
        self._config_loader.load()

        self._event_log: list[str] = []
        self._max_log_entries = 500

        self._server_running = False
        self._server_port: int = self._config_loader.get("server.port", 8000)

    @property
    def config(self) -> ConfigLoader:
        return self._config_loader

    def log_event(self, message: str, level: str = "INFO") -> None:
        """Record a lifecycle event and mirror it to the application log."""
        stamp = datetime.now().strftime("%H:%M:%S")
        self._event_log.append(f"[{stamp}] [{level}] {message}")
        overflow = len(self._event_log) - self._max_log_entries
        if overflow > 0:
            del self._event_log[:overflow]
        self._logger.info(message)

    def get_event_log(self) -> list[str]:
        return list(self._event_log)

    def set_server_status(self, running: bool, port: int = 8000) -> None:
        self._server_running = running
        self._server_port = port

    def get_server_status(self) -> tuple[bool, int]:
        return self._server_running, self._server_port
