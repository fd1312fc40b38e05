# Test configuration
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from bfhl.config import Settings  # noqa: E402


TEST_EMAIL = "operator@example.com"


@pytest.fixture
def settings() -> Settings:
    """Settings with a known email and a dummy provider key."""
    return Settings(
        OFFICIAL_EMAIL=TEST_EMAIL,
        GEMINI_API_KEY="test-key",
        _env_file=None,
    )
