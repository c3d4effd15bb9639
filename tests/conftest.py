"""
Shared test configuration.

Every test gets its own SQLite file so the store and startup migrations
never touch a developer database.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from product_api.app.core.config import TokenConfig, settings  # noqa: E402
from product_api.app.core.security import TokenValidator, create_access_token  # noqa: E402

TEST_SECRET = "test-secret-key"


@pytest.fixture(autouse=True)
def isolated_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the SQLite store at a throwaway file."""

    db_path = tmp_path / "products.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    return db_path


@pytest.fixture
def token_config() -> TokenConfig:
    return TokenConfig(secret_key=TEST_SECRET, algorithm="HS256", expire_seconds=3600)


@pytest.fixture
def token_validator(token_config: TokenConfig) -> TokenValidator:
    return TokenValidator(token_config)


@pytest.fixture
def valid_token(token_config: TokenConfig) -> str:
    return create_access_token(token_config, "1")


@pytest.fixture
def invalid_token(token_config: TokenConfig) -> str:
    other = TokenConfig(secret_key="another-secret", algorithm=token_config.algorithm)
    return create_access_token(other, "1")
