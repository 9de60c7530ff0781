"""Configuration constants for the Check Your Reflexes bot."""

# Session settings
SESSION_SECONDS = 60
STARTING_LIVES = 3
POINTS_PER_CORRECT = 10
TICK_INTERVAL = 1.0  # seconds

# Round duration schedule (rounds completed below threshold: seconds)
ROUND_DURATIONS = [
    (10, 3.0),
    (25, 2.0),
    (40, 1.5),
    (50, 1.0),
    (60, 2.0),
]
FINAL_ROUND_DURATION = 1.5

# Difficulty thresholds (rounds completed)
SAME_SHAPE_DECOYS_FROM = 18
BACKGROUND_CHURN_FROM = 35

# Difficulty badge shown on the game screen (rounds completed: badge)
DIFFICULTY_BADGES = [
    (51, 'X'),
    (36, 'H'),
    (21, 'M'),
]
DEFAULT_DIFFICULTY_BADGE = 'E'

# Level achieved on the game over screen (rounds completed: level)
LEVEL_THRESHOLDS = [
    (85, 8),
    (75, 7),
    (65, 6),
    (50, 5),
    (40, 4),
    (30, 3),
    (20, 2),
]
DEFAULT_LEVEL = 1

# Palettes
COLORS = ["Violet", "Orange", "Blue", "Yellow", "Red", "Green"]
SHAPES = ["Circle", "Hexagon", "Square", "Star", "Triangle"]
OPTIONS_PER_ROUND = 4
MAX_DECOY_ATTEMPTS = 1000

# Presentation
DEFAULT_BACKGROUND_COLOR = '#31017c'
TUTORIAL_PAGES = 3

# Leaderboard
LEADERBOARD_KEY = 'reflex_game_scores_v2'
LEADERBOARD_SIZE = 7
ANONYMOUS_PLAYER = 'Anonymous'
