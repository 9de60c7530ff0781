"""Database models and schemas."""

# SQL schemas for all tables

CREATE_LEADERBOARD_TABLE = """
CREATE TABLE IF NOT EXISTS leaderboard_scores (
    board TEXT NOT NULL,
    player TEXT NOT NULL,
    display_name TEXT,
    score INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (board, player)
);
"""

# Columns added after the first release, applied to older databases
ADDED_COLUMNS = [
    ("leaderboard_scores", "display_name", "TEXT"),
]

# Indexes for performance
CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_leaderboard_score ON leaderboard_scores(board, score DESC);",
]
