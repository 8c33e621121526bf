"""Running score of the current game."""


class ScoreManager:
    """Accumulates the player's score."""

    def __init__(self) -> None:
        self.score = 0

    def add_score(self, score: int) -> None:
        self.score += score