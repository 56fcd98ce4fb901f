"""Player state: remaining lives and score."""

MAX_LIVES = 3


class Player:
    """Tracks the player's lives and score for one game."""

    def __init__(self, initial_lives=MAX_LIVES):
        self.max_lives = initial_lives
        self.lives = initial_lives
        self.score = 0

    def lose_life(self):
        """Take one life away."""
        self.lives -= 1

    def add_score(self, points):
        """Add points to the score."""
        self.score += points

    def reset(self):
        """Restore full lives and clear the score."""
        self.lives = self.max_lives
        self.score = 0

    @property
    def is_game_over(self):
        """True once no lives are left."""
        return self.lives <= 0