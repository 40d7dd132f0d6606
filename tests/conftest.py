"""Shared fixtures and helpers for tests."""

import os

# Security settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from decoy.controllers.base import Base  # noqa: E402
from decoy.routing.ancestry import Ancestry  # noqa: E402
from decoy.routing.request import RequestSnapshot  # noqa: E402
from decoy.routing.url_generator import UrlGenerator  # noqa: E402
from decoy.routing.wildcard import Wildcard  # noqa: E402
from tests.cms_app import GOOD_TOKEN, cms_registry  # noqa: E402

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Ancestry helpers
# ---------------------------------------------------------------------------


def make_ancestry(
    controller: Base,
    path: str,
    method: str = "GET",
    inputs: dict | None = None,
) -> Ancestry:
    """Build an Ancestry for a controller as if handling ``method path``."""
    return Ancestry(
        controller,
        Wildcard("admin", method, path, registry=cms_registry),
        RequestSnapshot(method=method, url_path=path, inputs=inputs or {}),
        UrlGenerator("admin"),
    )


@pytest.fixture
def client() -> TestClient:
    from decoy.main import create_app

    app = create_app(
        auth_class="tests.cms_app.StaticAuth",
        controller_modules=["tests.cms_app"],
        registry=cms_registry,
    )
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {GOOD_TOKEN}"}
