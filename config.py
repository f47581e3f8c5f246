# config.py
import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-integer %s=%r, using %s", name, raw, default
        )
        return default


class Settings:
    APP_TITLE: str = os.getenv("APP_TITLE", "Interview Answer Coach")

    # How many questions a generated interview holds
    MAX_QUESTIONS: int = max(1, _int_env("MAX_QUESTIONS", 5))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once for the Streamlit process."""
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
