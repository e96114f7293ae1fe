"""
DirectoryModule wiring.
"""

from unittest.mock import MagicMock

import pytest

from modules.directory import DirectoryModule


@pytest.fixture
def patched_settings(monkeypatch, mock_directory_settings):
    monkeypatch.setattr(
        "modules.directory.directory_module.get_directory_settings",
        lambda: mock_directory_settings,
    )
    return mock_directory_settings


def _paths(router) -> set[str]:
    return {route.path for route in router.routes}


def test_inactive_until_entered(patched_settings):
    module = DirectoryModule()

    assert module.get_module_name() == "directory"
    assert module.get_api_router() is None
    assert module.get_page_router() is None
    assert module.get_status()["status"] == "initializing"


def test_entry_builds_api_and_page_routes(patched_settings):
    context = MagicMock()
    module = DirectoryModule()

    module.on_entry(context)

    assert _paths(module.get_api_router()) == {"/bodies", "/officials", "/leaders"}
    assert _paths(module.get_page_router()) == {"/explorer"}
    context.log_event.assert_called_once()
    assert "http://directory.test" in context.log_event.call_args.args[0]


def test_status_reports_upstream(patched_settings):
    module = DirectoryModule()
    module.on_entry(MagicMock())

    status = module.get_status()

    assert status["status"] == "active"
    assert status["details"]["api_base_url"] == "http://directory.test"


def test_unset_upstream_reads_from_request_origin(patched_settings):
    patched_settings.api_base_url = None
    context = MagicMock()
    module = DirectoryModule()

    module.on_entry(context)

    assert "origin serving each request" in context.log_event.call_args.args[0]
    assert module.get_status()["details"]["api_base_url"] is None
