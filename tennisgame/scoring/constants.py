"""Tennis point counts and their display tokens."""

from tennisgame.errors import ScoreGraphError

# Display token for each point count a game can show before deuce
POINT_NAMES = {
    0: "Love",
    1: "Fifteen",
    2: "Thirty",
    3: "Forty",
}

# Highest count that is ever rendered as a number
MAX_DISPLAY_COUNT = 3

# Highest count a lookup key can hold (one point past Forty)
MAX_LOOKUP_COUNT = 4


def translate(score: int) -> str:
    """Get the display token for a point count."""
    try:
        return POINT_NAMES[score]
    except (KeyError, TypeError):
        raise ScoreGraphError(f"unsupported score: {score!r}") from None
