import datetime
import logging
import sqlite3

logger = logging.getLogger(__name__)


def day_key(prefix, day):
    """Key for a day-scoped value, e.g. ``step_20261019``."""
    return f"{prefix}_{day:%Y%m%d}"


class DatabaseManager:
    """Handles SQL persistence of the day-keyed step and species values.

    Opening the database is the only place a failure is fatal. Once running,
    a failed read returns 0 and a failed write is dropped so the watch keeps ticking.
    """
    def __init__(self, db_path):
        self.db_path = db_path
        self.conn = sqlite3.connect(db_path)
        self.create_tables()
        self._perform_migrations()

    def create_tables(self):
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS day_values (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL,
                updated_at TEXT
            )
        """)
        self.conn.commit()

    def _perform_migrations(self):
        """Perform database schema migrations."""
        # Migration: early builds had no updated_at column
        cursor = self.conn.execute("PRAGMA table_info(day_values)")
        columns = [column[1] for column in cursor.fetchall()]
        if "updated_at" not in columns:
            logger.info("Performing migration: adding 'updated_at' column to 'day_values' table.")
            self.conn.execute("ALTER TABLE day_values ADD COLUMN updated_at TEXT")
            self.conn.commit()

    def get_value(self, key):
        """Returns the stored int for key, or 0 when absent or unreadable."""
        try:
            cursor = self.conn.execute("SELECT value FROM day_values WHERE key = ?", (key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Reading '%s' failed, using 0 (Error: %s)", key, e)
            return 0
        return int(row[0]) if row else 0

    def set_value(self, key, value):
        try:
            self.conn.execute(
                "INSERT OR REPLACE INTO day_values (key, value, updated_at) VALUES (?, ?, ?)",
                (key, int(value), datetime.datetime.now().isoformat(timespec="seconds")),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Dropping write of '%s' (Error: %s)", key, e)

    def get_day_value(self, prefix, day):
        return self.get_value(day_key(prefix, day))

    def set_day_value(self, prefix, day, value):
        self.set_value(day_key(prefix, day), value)

    def close(self):
        self.conn.close()
