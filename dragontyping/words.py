"""Word supply, typing buffer and per-word countdown."""

import logging
import random
import string
from pathlib import Path

logger = logging.getLogger(__name__)

WORD_TIME_LIMIT = 5.0
DEFAULT_WORDS_PATH = Path("assets") / "words.txt"
DEFAULT_WORDS = (
    "DRAGAO", "FOGO", "ASAS", "GUARDA", "TESOURO",
    "CAVERNA", "MITO", "LENDA", "GUERREIRO", "MAGIA",
    "ESCAMA", "GARRAS", "CHAMA", "DESTRUIDOR", "VALENTE",
    "ENIGMA", "CRIATURA", "ANCIENT", "PROTEC", "DEIXA",
)

_C_WHITESPACE = " \t\n\v\f\r"


def load_words(path):
    """Read one word per line from ``path``, upper-cased, in file order.

    Raises OSError when the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n").upper() for line in handle]


def _accepted_char(key):
    """Return the character for ``key`` if it is an ASCII letter or whitespace."""
    if isinstance(key, int):
        if not 0 < key < 128:
            return None
        key = chr(key)
    if len(key) == 1 and (key in string.ascii_letters or key in _C_WHITESPACE):
        return key
    return None


class WordManager:
    """Hands out shuffled words one at a time and tracks what was typed."""

    def __init__(self, time_limit=WORD_TIME_LIMIT, words_path=DEFAULT_WORDS_PATH, rng=None):
        self.time_limit = time_limit
        self.words_path = Path(words_path)
        self._rng = rng if rng is not None else random.Random()
        self._pool = []
        self.current_word = ""
        self.typed_text = ""
        self.word_timer = time_limit
        self._load_words()
        self.reset()

    def _load_words(self):
        try:
            self._pool = load_words(self.words_path)
        except OSError:
            logger.error("Could not open %s; using default words.", self.words_path)
            self._pool = list(DEFAULT_WORDS)
        else:
            logger.info("%d words loaded from %s", len(self._pool), self.words_path)
        self._rng.shuffle(self._pool)

    @property
    def remaining(self):
        """Number of words still waiting in the current shuffled pool."""
        return len(self._pool)

    def reset(self):
        """Take the next word, clear the typed text and restart the timer."""
        if not self._pool:
            self._load_words()
            logger.info("All words used. Re-shuffling.")
        if not self._pool:
            raise ValueError(f"no words available in {self.words_path}")
        self.current_word = self._pool.pop(0)
        self.typed_text = ""
        self.word_timer = self.time_limit

    def update(self, delta_time):
        """Run the countdown down by ``delta_time`` seconds, stopping at zero."""
        self.word_timer = max(self.word_timer - delta_time, 0)

    def handle_input(self, key):
        """Append a typed letter or whitespace, given as a code point or character."""
        char = _accepted_char(key)
        if char is not None:
            self.typed_text += char.upper()

    def handle_backspace(self):
        """Remove the last typed character, if any."""
        self.typed_text = self.typed_text[:-1]

    @property
    def time_up(self):
        return self.word_timer <= 0

    @property
    def word_correct(self):
        return self.typed_text == self.current_word

    @property
    def typed_prefix_correct(self):
        return self.current_word.startswith(self.typed_text)