import logging
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_chart.config import load_config, set_config  # noqa: E402
from gedcom_chart.logging import reconfigure  # noqa: E402
from gedcom_chart.parser_core import GEDCOMParser  # noqa: E402
from gedcom_chart.utils import tests_data_path  # noqa: E402


class ListHandler(logging.Handler):
    """Collects records; the gedcom_chart logger does not propagate to caplog."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def messages(self, level=None):
        return [
            r.getMessage()
            for r in self.records
            if level is None or r.levelno == level
        ]


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts from the repo config and handlers bound to the current stderr."""
    set_config(load_config())
    reconfigure()
    yield
    set_config(load_config())
    reconfigure()


@pytest.fixture
def chart_log():
    base = logging.getLogger("gedcom_chart")
    handler = ListHandler()
    base.addHandler(handler)
    previous = base.level
    base.setLevel(logging.DEBUG)
    yield handler
    base.setLevel(previous)
    base.removeHandler(handler)


@pytest.fixture
def family_path():
    return tests_data_path("family.ged")


@pytest.fixture
def family_graph(family_path):
    return GEDCOMParser().run(family_path)
