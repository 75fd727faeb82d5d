import json
from pathlib import Path

import pytest

from config.settings import Settings
from tests.mapping_graphs import SOURCE, external, internal


@pytest.fixture(autouse=True)
def _isolate_from_dotenv(monkeypatch, tmp_path):
    """Prevent .env files and environment from leaking into settings."""
    for var in (
        "OCL_API_URL",
        "REQUEST_TIMEOUT",
        "REQUEST_RETRIES",
        "MAPPINGS_LIMIT",
        "LEVELS_TO_CHECK",
        "MAPPINGS_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)  # no .env in tmp_path


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointed at a throwaway API host."""
    return Settings(ocl_api_url="https://ocl.test", request_retries=2)


@pytest.fixture
def mappings_file(tmp_path: Path) -> Path:
    """Static mapping file: A -> B -> C, A -> external, B -> D."""
    data = {
        "_metadata": {"source": "test"},
        SOURCE: [
            internal("A", "B"),
            external("A"),
            internal("B", "C"),
            internal("B", "D", map_type="CONCEPT-SET"),
        ],
    }
    p = tmp_path / "mappings.json"
    p.write_text(json.dumps(data))
    return p
