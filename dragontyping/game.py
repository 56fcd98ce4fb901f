"""The windowed game: drawing, sound and input on top of a Session."""

import argparse
import logging
from collections import deque
from pathlib import Path

import pygame

from .player import MAX_LIVES, Player
from .session import (
    FONT_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Event,
    Screen,
    Session,
    char_colors,
)
from .words import WORD_TIME_LIMIT, WordManager

logger = logging.getLogger(__name__)

_FPS = 60
_RAYWHITE = (245, 245, 245)
_WHITE = (255, 255, 255)
_GOLD = (255, 203, 0)
_LIGHTGRAY = (200, 200, 200)
_GRAY = (130, 130, 130)
_GREEN = (0, 228, 48)
_RED = (230, 41, 55)
_DARKBLUE = (0, 82, 172)


class Game:
    """Opens the window, loads assets and runs the main loop."""

    def __init__(self, asset_dir="assets"):
        self.asset_dir = Path(asset_dir)
        pygame.init()
        self._screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Dragon Typing")
        self._fonts = {}
        self._audio = self._init_audio()

        self._gameplay_background = self._load_image("background_dragon.jpg")
        self._menu_background = self._load_image("menu_background.jpg")
        self._music_loaded = self._load_music("medieval-background.wav")
        self._correct_sound = self._load_sound("correct_sound.mp3")
        self._life_lost_sound = self._load_sound("life_lost_sound.wav")

        words = WordManager(WORD_TIME_LIMIT, self.asset_dir / "words.txt")
        self.session = Session(Player(MAX_LIVES), words, measure=self._measure)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _init_audio(self):
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.error("Audio unavailable: %s", exc)
            return False
        return True

    def _load_image(self, name):
        try:
            image = pygame.image.load(str(self.asset_dir / name)).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.error("Failed to load %s: %s", name, exc)
            return None
        return pygame.transform.scale(image, (SCREEN_WIDTH, SCREEN_HEIGHT))

    def _load_music(self, name):
        if not self._audio:
            return False
        try:
            pygame.mixer.music.load(str(self.asset_dir / name))
        except (pygame.error, FileNotFoundError) as exc:
            logger.error("Failed to load %s: %s", name, exc)
            return False
        return True

    def _load_sound(self, name):
        if not self._audio:
            return None
        try:
            return pygame.mixer.Sound(str(self.asset_dir / name))
        except (pygame.error, FileNotFoundError) as exc:
            logger.error("Failed to load %s: %s", name, exc)
            return None

    def _font(self, size):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _measure(self, text, size):
        return self._font(size).size(text)[0]

    def _text(self, text, x, y, size, color):
        self._screen.blit(self._font(size).render(text, True, color), (x, y))

    def _centered(self, text, y, size, color):
        self._text(text, SCREEN_WIDTH // 2 - self._measure(text, size) // 2, y, size, color)

    def _background(self, image):
        if image is not None:
            self._screen.blit(image, (0, 0))

    def _play(self, sound):
        if sound is not None:
            sound.play()

    def run(self):
        """Run frames until the window is closed or Escape is pressed."""
        if self._music_loaded:
            pygame.mixer.music.play(-1)
        clock = pygame.time.Clock()
        pending_chars = deque()
        running = True
        while running:
            delta_time = clock.tick(_FPS) / 1000.0
            enter = backspace = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        enter = True
                    elif event.key == pygame.K_BACKSPACE:
                        backspace = True
                    elif event.key == pygame.K_ESCAPE:
                        running = False
                elif event.type == pygame.TEXTINPUT:
                    pending_chars.extend(event.text)

            self._update(delta_time, enter, backspace, pending_chars)
            self._draw()
            pygame.display.flip()
        if self._music_loaded:
            pygame.mixer.music.stop()

    def _update(self, delta_time, enter, backspace, pending_chars):
        session = self.session
        if session.screen is Screen.GAMEPLAY:
            char = pending_chars.popleft() if pending_chars else None
            for event in session.update(delta_time, char, backspace):
                if event is Event.LIFE_LOST:
                    self._play(self._life_lost_sound)
                elif event is Event.WORD_CORRECT:
                    self._play(self._correct_sound)
        else:
            pending_chars.clear()
            if enter:
                session.press_enter()

    def _draw(self):
        self._screen.fill(_RAYWHITE)
        screen = self.session.screen
        if screen is Screen.MENU:
            self._draw_menu()
        elif screen is Screen.GAMEPLAY:
            self._draw_gameplay()
        else:
            self._draw_game_over()

    def _draw_menu(self):
        self._background(self._menu_background)
        self._centered("DRAGON TYPING", SCREEN_HEIGHT // 4 - 100, 90, _GOLD)
        enter_y = SCREEN_HEIGHT // 2 + 150
        self._centered("Pressione ENTER para Comecar", enter_y, 40, _LIGHTGRAY)
        self._centered("Digite as palavras antes que o tempo acabe!", enter_y + 60, 25, _GRAY)

    def _draw_gameplay(self):
        self._background(self._gameplay_background)
        words = self.session.words
        word, typed = words.current_word, words.typed_text
        x, y = self.session.word_position
        for index, (char, state) in enumerate(zip(word, char_colors(word, typed))):
            color = _LIGHTGRAY if state is None else (_GREEN if state else _RED)
            self._text(char, x + self._measure(word[:index], FONT_SIZE), y, FONT_SIZE, color)

        self._centered(typed, SCREEN_HEIGHT - 100, FONT_SIZE, _GRAY)
        player = self.session.player
        self._text(f"Tempo: {words.word_timer:.1f}", 20, 20, 30, _DARKBLUE)
        lives_x = SCREEN_WIDTH - self._measure("Vidas: X", 30) - 20
        self._text(f"Vidas: {player.lives}", lives_x, 20, 30, _RED)
        self._text(f"Pontuacao: {player.score}", 20, 60, 30, _GREEN)

    def _draw_game_over(self):
        self._background(self._menu_background)
        self._centered("GAME OVER!", SCREEN_HEIGHT // 4, 80, _RED)
        self._centered(f"Pontuacao final: {self.session.player.score}", SCREEN_HEIGHT // 2, 40, _WHITE)
        self._centered("Pressione ENTER para Voltar ao Menu", SCREEN_HEIGHT // 2 + 100, 30, _LIGHTGRAY)

    def close(self):
        """Release audio and the window."""
        if self._audio and pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()


def main(argv=None):
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="dragontyping", description="Dragon Typing game.")
    parser.add_argument("--assets", default="assets", help="directory holding images, sounds and words.txt")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    with Game(args.assets) as game:
        game.run()
    return 0