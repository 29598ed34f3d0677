import logging

from studyhub.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Настройка root-логгера приложения (формат и уровень из LOG_LEVEL)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQL-эхо нам не нужно даже на DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
