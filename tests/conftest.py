from pathlib import Path
import pytest

from dndsheet.engine.loader import load_content
from dndsheet.engine.settings import Settings

CONTENT_DIR = Path(__file__).resolve().parents[1] / "src" / "dndsheet" / "content"

@pytest.fixture
def content():
    return load_content(CONTENT_DIR)

@pytest.fixture
def settings(tmp_path):
    return Settings(log_file=tmp_path / "dndsheet.log", rng_seed=1234)
