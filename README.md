# dragontyping

A small typing game. A word appears somewhere on the screen, and you have
five seconds to type it. A correct word scores 10 points. If the timer runs
out, you lose one of your three lives. When no lives are left, the game is
over.

## Installing

```
pip install .
```

## Playing

```
dragontyping
dragontyping --assets path/to/assets
```

`--assets` names the directory holding the images, sounds and word list; it
defaults to `assets` in the current directory.

- On the menu, press **Enter** to start.
- Type the word shown. Only letters and whitespace are accepted, and they
  are turned to upper case. Letters of the word turn green when they match
  what you typed and red when they do not. **Backspace** removes the last
  character typed.
- On the game-over screen, press **Enter** to go back to the menu.
- Close the window or press **Escape** to quit.

## Assets

The game reads these files from the assets directory:

| File                        | Use                               |
|-----------------------------|-----------------------------------|
| `background_dragon.jpg`     | background while playing          |
| `menu_background.jpg`       | background of menu and game over  |
| `medieval-background.wav`   | background music, looped          |
| `correct_sound.mp3`         | played on a correct word          |
| `life_lost_sound.wav`       | played when a life is lost        |
| `words.txt`                 | one word per line                 |

Missing images and sounds are logged and skipped, and the game still runs;
if no audio device can be opened, the game runs silently. Words in
`words.txt` are turned to upper case. Without that file, a built-in list of
words is used. Words are shuffled and each is shown once before the list is
loaded and shuffled again.

## Using the pieces

The game logic in `dragontyping.session`, `dragontyping.player` and
`dragontyping.words` works without a window, which makes it easy to test or
reuse:

```python
import random
from dragontyping.player import Player
from dragontyping.words import WordManager
from dragontyping.session import Session

rng = random.Random(1)
session = Session(Player(3), WordManager(5.0, "assets/words.txt", rng), rng)
session.press_enter()                    # menu -> gameplay
for ch in session.words.current_word:
    session.update(0.1, ch, False)
print(session.player.score)              # 10
```

- `Session.update(delta_time, char, backspace)` advances one frame and
  returns a list of `Event` values (`WORD_CORRECT`, `LIFE_LOST`,
  `GAME_OVER`), so a front end can play sounds or log them. It does nothing
  outside the `Screen.GAMEPLAY` screen.
- `Session.press_enter()` moves from the menu to gameplay, or from game over
  back to the menu. `Session.reset_game()` resets the player and word and
  returns to the menu.
- `Session.new_word_position()` picks a random position for the current
  word inside the bounds given by `word_position_bounds`. The optional
  `measure(text, font_size)` argument of `Session` gives text width in
  pixels; without it, a rough estimate is used.
- `char_colors(word, typed)` gives, per character of the word, `True` if
  typed correctly, `False` if typed wrong, or `None` if not yet typed.
- `WordManager` hands out words (`current_word`), keeps the typed text
  (`typed_text`) and counts down `word_timer`; `load_words(path)` reads a
  word list.
- `Player` keeps `lives` and `score`; `is_game_over` is true once no lives
  are left.

## What it does not do

There is no high-score table and nothing is saved between runs; the score
lives only as long as the game is open.

## Tests

```
pip install .[test]
pytest
```