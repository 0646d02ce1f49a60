import os
import tempfile

import pytest
from pathlib import Path
from unittest.mock import patch

# nwrap.config loads at import time, before any fixture runs.
os.environ.setdefault("NWRAP_CONFIG_DIR", tempfile.mkdtemp(prefix="nwrap-test-config-"))


@pytest.fixture(autouse=True)
def mock_settings_env_vars(tmp_path):
    """Automatically mock HOME to ensure test isolation."""
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    with patch("pathlib.Path.home", return_value=fake_home):
        with patch.dict(os.environ, {"HOME": str(fake_home)}):
            yield
