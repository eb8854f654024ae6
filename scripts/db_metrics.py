"""Print a one-off JSON snapshot of the repertoire database pool."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from sqlalchemy import func, select

from repertoire.db.models import MoveModel
from repertoire.db.monitoring import get_pool_snapshot
from repertoire.db.session import get_engine

LOGGER = logging.getLogger("repertoire.db_metrics")


def collect() -> dict:
    engine = get_engine()
    with engine.connect() as connection:
        move_count = connection.execute(select(func.count()).select_from(MoveModel)).scalar_one()
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "moves": move_count,
        "pool": get_pool_snapshot(engine),
    }


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    try:
        print(json.dumps(collect()))
        return 0
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Failed to collect database metrics: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
