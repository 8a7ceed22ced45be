from __future__ import annotations

from typing import Any, Callable, Optional

import pytest

from sales_advisor.client import GenerationClient, reset_client
from sales_advisor.config import CREDENTIAL_VARS, Settings

from tests.helpers import FakeSdk


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in ("SALES_ADVISOR_MODEL", "SALES_ADVISOR_BASE_URL", "SALES_ADVISOR_LANGUAGE",
                 "SALES_ADVISOR_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    reset_client()
    yield
    reset_client()


@pytest.fixture
def make_client() -> Callable[..., tuple[GenerationClient, FakeSdk]]:
    def _make(reply: Optional[str] = "", *, error: Optional[Exception] = None, api_key: Optional[str] = "test-key",
              language: str = "es") -> tuple[GenerationClient, FakeSdk]:
        sdk = FakeSdk(reply, error)
        client = GenerationClient(Settings(api_key=api_key, language=language), sdk=sdk)
        return client, sdk

    return _make


@pytest.fixture
def sales_headers() -> list[str]:
    return ["date", "price", "ad_spend", "store", "sales"]


@pytest.fixture
def sales_rows() -> list[dict[str, Any]]:
    return [
        {"date": f"2024-01-{i + 1:02d}", "price": 10.0 + i, "ad_spend": 100 * i, "store": "norte", "sales": 50 + 3 * i}
        for i in range(8)
    ]
