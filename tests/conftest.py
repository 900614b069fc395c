from __future__ import annotations

import io
import sys
from collections import Counter
from pathlib import Path
from typing import List

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory output sink for print statements."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def _no_tally_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TALLY_* settings out of CLI defaults."""
    monkeypatch.delenv("TALLY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TALLY_PARSER", raising=False)


def pytest_collection_modifyitems(
    session: pytest.Session,
    config: pytest.Config,
    items: List[pytest.Item],
) -> None:
    """Refuse to run when two scenarios end up with the same node ID."""
    del session, config

    counts = Counter(item.nodeid for item in items)
    duplicates = sorted(nodeid for nodeid, n in counts.items() if n > 1)
    if not duplicates:
        return

    lines = "\n".join(f"- {nodeid}" for nodeid in duplicates)
    raise pytest.UsageError(f"Duplicate scenario ids:\n{lines}")
