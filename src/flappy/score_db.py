"""
score_db.py: Best-score persistence injected into the game engine.
"""

import sqlite3
from typing import List, Optional, Protocol, Tuple

from .constants import DB_FILE, DEFAULT_PROFILE


class ScoreStore(Protocol):
    """Get/set access to a single best-score integer."""

    def get_best(self) -> int: ...

    def set_best(self, score: int) -> None: ...


def _check_score(score: int):
    if score < 0:
        raise ValueError(f"score must not be negative, got {score}")


class MemoryScoreStore:
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, best: int = 0):
        _check_score(best)
        self.best = best

    def get_best(self) -> int:
        return self.best

    def set_best(self, score: int):
        _check_score(score)
        self.best = score


class ScoreDatabase:
    """Handles all interaction with the SQLite score database."""

    def __init__(self, db_file: str = DB_FILE, profile: str = DEFAULT_PROFILE):
        self.profile = profile
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                profile TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_best(self) -> int:
        """Best score of this profile, 0 if none was recorded yet."""
        self.cur.execute("SELECT best FROM Scores WHERE profile=?", (self.profile,))
        row: Optional[Tuple[int]] = self.cur.fetchone()
        return row[0] if row else 0

    def set_best(self, score: int):
        """Stores the score unless a higher one is already recorded."""
        _check_score(score)
        self.cur.execute("""
            INSERT INTO Scores (profile, best) VALUES (?, ?)
            ON CONFLICT(profile) DO UPDATE SET best = MAX(best, excluded.best)
        """, (self.profile, score))
        self.conn.commit()

    def get_leaderboard(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Fetches the top scores (profile, best_score)."""
        self.cur.execute("""
            SELECT profile, best
            FROM Scores
            ORDER BY best DESC, profile
            LIMIT ?
        """, (limit,))
        return self.cur.fetchall()

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
