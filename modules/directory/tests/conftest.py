"""
Conftest for Directory Module Tests.

Provides sample officials and bodies shaped like the JSON API payloads.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.directory.schemas import BodySchema, OfficialSchema


@pytest.fixture
def sample_officials_payload() -> list[dict]:
    return [
        {
            "id": 1,
            "name_en": "Xi Jinping",
            "name_cn": "习近平",
            "age": 70,
            "generation": 5.0,
            "home_province": "Shaanxi",
            "positions": [
                {"title": "General Secretary", "institution": "Chinese Communist Party"},
                {"title": "President", "institution": "People's Republic of China"},
            ],
            "degrees": [
                {"name": "PhD in Law", "level": "doctoral", "type": "humanities"},
                {"name": "BS in Chemical Engineering", "level": "bachelors", "type": "stem"},
            ],
        },
        {
            "id": 2,
            "name_en": "Li Qiang",
            "name_cn": "李强",
            "age": 64,
            "generation": 5.0,
            "home_province": "Zhejiang",
            "positions": ["Premier"],
            "degrees": [
                {"name": "BS in Agricultural Engineering", "level": "bachelors", "type": "stem"},
            ],
        },
        {
            "id": 3,
            "name_en": "Zhao Leji",
            "name_cn": "赵乐际",
            "age": 67,
            "generation": 5.0,
            "home_province": "Qinghai",
            "positions": [],
            "degrees": [{"name": "BS in Economics", "level": "bachelors", "type": "humanities"}],
        },
    ]


@pytest.fixture
def sample_bodies_payload() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "Chinese Communist Party",
            "members": [{"id": 1, "title": "General Secretary"}],
            "parent": None,
            "caption": "Party Leadership",
            "order": 1,
        },
        {
            "id": 3,
            "name": "State Council",
            "members": [{"id": 2, "title": "Premier"}],
            "parent": None,
            "caption": "Government",
            "order": 2,
        },
        {
            "id": 2,
            "name": "Politburo Standing Committee",
            "members": [
                {"id": 1, "title": "General Secretary"},
                {"id": 2, "title": None},
                {"id": 3, "title": None},
            ],
            "parent": 1,
            "caption": "Top Leadership",
            "order": 1,
        },
    ]


@pytest.fixture
def sample_officials(sample_officials_payload) -> list[OfficialSchema]:
    return [OfficialSchema.model_validate(item) for item in sample_officials_payload]


@pytest.fixture
def sample_bodies(sample_bodies_payload) -> list[BodySchema]:
    return [BodySchema.model_validate(item) for item in sample_bodies_payload]


@pytest.fixture
def mock_db_session():
    """Create mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def mock_directory_settings():
    settings = MagicMock()
    settings.app_name = "Chinese Leadership Explorer"
    settings.api_base_url = "http://directory.test"
    settings.leader_image_placeholder = "/placeholder.svg?height=200&width=150"
    return settings
