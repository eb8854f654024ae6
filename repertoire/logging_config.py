import logging
import os
from logging.config import dictConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Loggers that trace how a study line was chosen.
STUDY_LOGGERS = (
    "repertoire.study_routes",
    "repertoire.study_planner",
    "repertoire.line_search",
    "repertoire.line_builder",
)


def _level(name: str, default: str) -> str:
    return os.getenv(name, default).strip().upper() or default


def configure_logging() -> None:
    """Configure service logging from ``REPERTOIRE_*`` environment flags.

    ``REPERTOIRE_LOG_LEVEL`` sets the ``repertoire`` package level while third
    party libraries stay at ``WARNING`` unless the matching flag raises them.
    ``REPERTOIRE_DEBUG_STUDY=1`` turns on DEBUG for the line selection modules
    and for uvicorn's access log, so one request can be followed end to end.
    """
    debug_study = os.getenv("REPERTOIRE_DEBUG_STUDY", "0") == "1"
    loggers = {
        "repertoire": {"level": _level("REPERTOIRE_LOG_LEVEL", "INFO")},
        "sqlalchemy.engine": {"level": _level("REPERTOIRE_SQL_LOG_LEVEL", "WARNING")},
        "uvicorn.access": {"level": "DEBUG" if debug_study else _level("REPERTOIRE_ACCESS_LOG_LEVEL", "WARNING")},
    }
    loggers.update({name: {"level": "DEBUG" if debug_study else "NOTSET"} for name in STUDY_LOGGERS})

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": os.getenv("REPERTOIRE_LOG_FORMAT") or DEFAULT_LOG_FORMAT},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["default"], "level": "WARNING"},
            "loggers": loggers,
        }
    )
    logging.getLogger(__name__).debug("Logging configured (study debug=%s)", debug_study)
