from pathlib import Path

import pytest

ENV_KEYS = [
    "LINEREV_INPUT_PATH",
    "LINEREV_OUTPUT_PATH",
    "LINEREV_ENCODING",
    "LINEREV_ERRORS",
    "LINEREV_STRICT",
    "LINEREV_LOG_LEVEL",
    "LINEREV_LOG_FILE",
]


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: unit tests for linerev")
    config.addinivalue_line("markers", "property: property-based tests for linerev")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
