"""
score_db.py: Persistence layer for the single best score.
"""

import logging
import sqlite3
from typing import Optional

from .constants import HIGHSCORE_DB_FILE, HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Keeps one integer under a fixed key in a small SQLite table.
    If the database can't be opened the store runs without persistence:
    loads return 0 and saves are dropped.
    """
    def __init__(self, db_file: str = HIGHSCORE_DB_FILE, key: str = HIGHSCORE_KEY):
        self.key = key
        self.conn: Optional[sqlite3.Connection] = None
        self.cur: Optional[sqlite3.Cursor] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error as e:
            logger.warning("High score storage unavailable (%s): %s", db_file, e)
            self.close()

    @property
    def available(self) -> bool:
        return self.conn is not None

    def setup(self):
        """Creates the table if it doesn't exist."""
        # Values are stored as text, the same way they come back from a key/value store
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS HighScores (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def _read_raw(self) -> Optional[str]:
        self.cur.execute("SELECT value FROM HighScores WHERE key=?", (self.key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def load_high_score(self) -> int:
        """Returns the stored best score, or 0 if missing or unreadable."""
        if not self.available:
            return 0
        try:
            raw = self._read_raw()
        except sqlite3.Error as e:
            logger.warning("Could not read high score: %s", e)
            return 0
        if raw is None:
            return 0
        try:
            return max(0, int(str(raw).strip()))
        except ValueError:
            logger.warning("Ignoring unparseable high score %r", raw)
            return 0

    def save_high_score(self, value: int):
        """Writes the best score. A failed write only means it isn't persisted."""
        if not self.available:
            return
        try:
            self.cur.execute(
                "INSERT OR REPLACE INTO HighScores (key, value) VALUES (?, ?)",
                (self.key, str(int(value))))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save high score %d: %s", value, e)

    def close(self):
        if self.conn is not None:
            self.conn.close()
        self.conn = None
        self.cur = None
