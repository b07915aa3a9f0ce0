import sys
from pathlib import Path
from types import SimpleNamespace

# -------------------------------------------------------------------
# Make repo root importable BEFORE importing any project packages.
# -------------------------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

import parity.capability  # noqa: E402
import parity.classification  # noqa: E402
from parity import CapabilityRegistry, ContainerKind, hide, tag_container  # noqa: E402


@pytest.fixture
def fresh_registry(monkeypatch) -> CapabilityRegistry:
    """
    Isolated capability registry so tagged test containers never leak
    into other tests.
    """
    fresh = CapabilityRegistry()
    monkeypatch.setattr(parity.classification, "registry", fresh)
    monkeypatch.setattr(parity.capability, "registry", fresh)
    return fresh


@pytest.fixture
def containers(fresh_registry):
    """
    Minimal observable-style containers living outside the parity package.

    Both keep their contents in hidden fields, so their instances have
    no own keys, and both are recognized only through their capability
    markers.
    """

    @tag_container("ObservableArray", ContainerKind.SEQUENCE)
    class ObservableArray:
        def __init__(self, items=()):
            hide(self, "values", list(items))

        def __len__(self):
            return len(self.values)

        def __getitem__(self, index):
            return self.values[index]

        def __iter__(self):
            return iter(self.values)

    @tag_container("ObservableMap", ContainerKind.MAP)
    class ObservableMap:
        def __init__(self, entries=()):
            hide(self, "data", dict(entries))

        def __len__(self):
            return len(self.data)

        def __contains__(self, key):
            return key in self.data

        def __iter__(self):
            return iter(self.data)

        def keys(self):
            return self.data.keys()

        def get(self, key, default=None):
            return self.data.get(key, default)

    return SimpleNamespace(ObservableArray=ObservableArray, ObservableMap=ObservableMap)
