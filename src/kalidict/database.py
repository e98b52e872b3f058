import sqlite3
import os
from .config import settings


def db_path() -> str:
    return os.path.join(settings.DB_DIR, settings.DB_FILE)


def get_db_connection():
    """Establishes a connection to the SQLite database."""
    conn = sqlite3.connect(db_path())
    conn.row_factory = sqlite3.Row
    return conn


def create_words_table():
    """Creates the words table if it doesn't exist."""
    conn = get_db_connection()
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS words (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                word TEXT NOT NULL,
                meaning TEXT NOT NULL DEFAULT '',
                created_at TIMESTAMP
            );
        """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_words_word ON words (word);")
    conn.close()


def create_log_table():
    """Creates the log table if it doesn't exist."""
    conn = get_db_connection()
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp DATETIME DEFAULT CURRENT_TIMESTAMP,
                level TEXT,
                logger TEXT,
                message TEXT
            );
        """
        )
    conn.close()


def init_db():
    """Initializes the database and creates necessary tables."""
    if not os.path.exists(settings.DB_DIR):
        os.makedirs(settings.DB_DIR)
    create_words_table()
    create_log_table()
