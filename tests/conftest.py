import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Widget tests run without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from radialcolor.core import Rgba, build_synchronizer  # noqa: E402


@pytest.fixture
def changes():
    return []


@pytest.fixture
def sync(changes):
    return build_synchronizer(on_change=changes.append)


@pytest.fixture
def loaded(sync, changes):
    sync.load_color(Rgba(255, 0, 128, 128))
    changes.clear()
    return sync
