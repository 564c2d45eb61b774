import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from randomkey.settings import use_config


@pytest.fixture(autouse=True)
def bundled_settings():
    """Every test starts from the bundled app.yaml."""
    use_config(None)
    yield
    use_config(None)
