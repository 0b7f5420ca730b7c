import sys
from pathlib import Path

import pytest

# Add scripts/ to path so awscron_engine is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))


@pytest.fixture
def notices():
    """Collects advisory notices passed to convert(notify=...)."""
    collected = []
    return collected


@pytest.fixture
def weekday_record():
    """A record equivalent to "30 9 * * 1-5"."""
    return {
        "minute": "30",
        "hour": "9",
        "dayOfMonth": "*",
        "month": "*",
        "dayOfWeek": "1-5",
    }
