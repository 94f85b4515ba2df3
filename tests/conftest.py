import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TOKEN_URI_STRICT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
