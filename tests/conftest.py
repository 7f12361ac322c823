from __future__ import annotations

import pytest

from config import AppConfig
from data.mock_data import MockStore


@pytest.fixture
def cfg():
    return AppConfig(
        supabase_url="https://demo-project.supabase.co",
        supabase_key="anon-key",
        admin_password="abc",
        admin_password_is_fallback=False,
        viewer_base_url="https://viewer.example.com",
        default_use_mock=False,
        store_timeout_seconds=5.0,
        recent_limit=50,
        log_level="INFO",
    )


@pytest.fixture
def raw_rows():
    # newest first, as the store returns them
    return [
        {
            "id": "v3",
            "content": "rushes over stones",
            "created_at": "2024-01-03T00:00:00Z",
            "layer": {"word": "river"},
            "essences": [
                {"content": "flowing calm", "images": [{"image_url": "http://x/img.png"}, {"image_url": "http://x/2.png"}]},
                {"content": "second essence", "images": [{"image_url": "http://x/other.png"}]},
            ],
        },
        {
            "id": "v2",
            "content": "glows at dusk",
            "created_at": "2024-01-02T00:00:00Z",
            "layer": {"word": "ember"},
            "essences": [{"content": "warmth", "images": []}],
        },
        {
            "id": "v1",
            "content": "hums quietly",
            "created_at": "2024-01-01T00:00:00Z",
            "layer": None,
            "essences": [],
        },
    ]


@pytest.fixture
def store(raw_rows):
    return MockStore(rows=raw_rows)
