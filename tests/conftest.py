import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from emulog.database import build_engine
from emulog.services.storage import Storage


@pytest.fixture
def storage(tmp_path):
    s = Storage(build_engine(f"sqlite:///{tmp_path / 'emu_log.db'}"))
    s.create_tables()
    yield s
    s.engine.dispose()
