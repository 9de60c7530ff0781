"""Text formatting helpers."""


def format_clock(seconds: int) -> str:
    """Format remaining session seconds as m:ss."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_round_seconds(seconds: float) -> str:
    """Format the round clock, dropping a trailing .0."""
    seconds = max(0.0, seconds)
    if float(seconds).is_integer():
        return f"{int(seconds)}s"
    return f"{seconds:.1f}s"


def format_score(score: int) -> str:
    """Format score with commas."""
    return f"{score:,}"


def format_hearts(lives: int) -> str:
    """One heart per remaining life."""
    return "❤️" * max(0, lives) or "💀"


def progress_bar(ratio: float, width: int = 10, filled: str = "█", empty: str = "░") -> str:
    """Render a ratio (0.0 - 1.0) as a text bar."""
    ratio = max(0.0, min(1.0, ratio))
    count = round(ratio * width)
    return filled * count + empty * (width - count)
