"""Screen flow and gameplay rules, independent of any display."""

import enum
import logging
import random

from .player import MAX_LIVES, Player
from .words import WordManager

logger = logging.getLogger(__name__)

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FONT_SIZE = 40
POINTS_PER_WORD = 10


class Screen(enum.Enum):
    MENU = 0
    GAMEPLAY = 1
    GAME_OVER = 2


class Event(enum.Enum):
    """Things that happened during an update, for sound and logging."""

    WORD_CORRECT = enum.auto()
    LIFE_LOST = enum.auto()
    GAME_OVER = enum.auto()


def _estimate_width(text, font_size):
    return len(text) * font_size // 2


def word_position_bounds(word_width, screen_width=SCREEN_WIDTH, screen_height=SCREEN_HEIGHT):
    """Return ``(min_x, max_x, min_y, max_y)`` for placing a word on screen."""
    hud_top_padding = 50
    hud_height = 50
    min_y = hud_top_padding + hud_height + 50
    max_y = screen_height - 200
    min_x = 50
    max_x = screen_width - word_width - 50

    if min_y >= max_y:
        min_y = screen_height // 4
    if min_y >= max_y:
        max_y = screen_height // 2
    if min_x >= max_x:
        min_x = screen_width // 4
        max_x = screen_width // 2
    return min_x, max_x, min_y, max_y


def char_colors(word, typed):
    """Per character of ``word``: True if typed right, False if wrong, None if untyped."""
    states = []
    for index, expected in enumerate(word):
        if index < len(typed):
            states.append(typed[index] == expected)
        else:
            states.append(None)
    return states


class Session:
    """One run of the game: current screen, player and word in play."""

    def __init__(self, player=None, words=None, rng=None, measure=None):
        self.player = player if player is not None else Player(MAX_LIVES)
        self.words = words if words is not None else WordManager()
        self._rng = rng if rng is not None else random.Random()
        self.measure = measure if measure is not None else _estimate_width
        self.screen = Screen.MENU
        self.word_position = (0, 0)
        self.new_word_position()

    def press_enter(self):
        """Start a game from the menu, or return to the menu after game over."""
        if self.screen is Screen.MENU:
            self.screen = Screen.GAMEPLAY
            self.player.reset()
            self.words.reset()
            self.new_word_position()
        elif self.screen is Screen.GAME_OVER:
            self.screen = Screen.MENU

    def update(self, delta_time, char=None, backspace=False):
        """Advance gameplay by one frame and return the events that occurred."""
        events = []
        if self.screen is not Screen.GAMEPLAY:
            return events

        self.words.update(delta_time)
        if self.words.time_up:
            self.player.lose_life()
            events.append(Event.LIFE_LOST)
            logger.info("Time is up! Lives left: %d", self.player.lives)
            if self.player.is_game_over:
                self.screen = Screen.GAME_OVER
                events.append(Event.GAME_OVER)
            else:
                self.words.reset()
                self.new_word_position()

        if char is not None:
            self.words.handle_input(char)
        if backspace:
            self.words.handle_backspace()

        if self.words.word_correct:
            self.player.add_score(POINTS_PER_WORD)
            events.append(Event.WORD_CORRECT)
            logger.info("Correct word! Score: %d", self.player.score)
            self.words.reset()
            self.new_word_position()
        return events

    def reset_game(self):
        """Reset player and word, and go back to the menu."""
        self.player.reset()
        self.words.reset()
        self.screen = Screen.MENU

    def new_word_position(self):
        """Pick a random on-screen position for the current word and return it."""
        word = self.words.current_word
        min_x, max_x, min_y, max_y = word_position_bounds(
            self.measure(word, FONT_SIZE), SCREEN_WIDTH, SCREEN_HEIGHT
        )
        self.word_position = (self._rng.randint(min_x, max_x), self._rng.randint(min_y, max_y))
        logger.info("New word position: %s for word: %s", self.word_position, word)
        return self.word_position