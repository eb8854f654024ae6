from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.engine import Engine

from repertoire.config import get_settings
from repertoire.db.base import Base
from repertoire.db import models  # noqa: F401
from repertoire.db.session import dispose_engine, get_engine


@pytest.fixture
def database(tmp_path, monkeypatch) -> Iterator[Engine]:
    monkeypatch.setenv("REPERTOIRE_DATABASE_URL", f"sqlite:///{tmp_path / 'repertoire.sqlite'}")
    get_settings.cache_clear()
    dispose_engine()
    engine = get_engine()
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        dispose_engine()
        get_settings.cache_clear()
