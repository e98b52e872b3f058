import logging
from .database import get_db_connection


class SQLiteHandler(logging.Handler):
    """
    A logging handler that writes records to the ``logs`` table.
    """

    def emit(self, record):
        try:
            conn = get_db_connection()
            with conn:
                conn.execute(
                    "INSERT INTO logs (level, logger, message) VALUES (?, ?, ?)",
                    (record.levelname, record.name, self.format(record)),
                )
            conn.close()
        except Exception:
            self.handleError(record)
