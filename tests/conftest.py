import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DIREWOLF_ENV_VARS = (
    "DIREWOLF_STRICT_OPTIONS",
    "DIREWOLF_LOG_LEVEL",
    "DIREWOLF_LOG_JSON",
    "DIREWOLF_LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in DIREWOLF_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
