import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes", "on")


QUIZ_MODES = ("multiple-choice", "written", "mixed")


def _env_choice(name: str, default: str, choices) -> str:
    value = os.environ.get(name, default)
    if value not in choices:
        logging.getLogger(__name__).warning(
            f"Invalid {name}={value!r}, using {default!r}"
        )
        return default
    return value


class Settings:
    PROJECT_NAME: str = "kalidict"
    DEBUG: bool = _env_flag("DEBUG")
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "3000"))
    LOG_DIR: str = os.environ.get("LOG_DIR", "log")
    LOG_FILE: str = "kalidict.log"
    LOG_TO_DB: bool = _env_flag("LOG_TO_DB", "1")
    DB_DIR: str = os.environ.get("DB_DIR", "db")
    DB_FILE: str = "kalidict.db"
    STATIC_DIR: str = os.environ.get("STATIC_DIR", "static")
    VOCAB_DIR: str = os.environ.get("VOCAB_DIR", "vocabulary")
    SEED_ON_STARTUP: bool = _env_flag("SEED_ON_STARTUP", "1")
    QUESTION_LIMIT: int = int(os.environ.get("QUESTION_LIMIT", "10"))
    DEFAULT_MODE: str = _env_choice("DEFAULT_MODE", "multiple-choice", QUIZ_MODES)
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
