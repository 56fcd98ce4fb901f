import random

import pytest

from dragontyping.words import DEFAULT_WORDS, WORD_TIME_LIMIT, WordManager, load_words


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("dragon\nfire\nwings\n", encoding="utf-8")
    return path


def test_load_words_uppercases_in_order(words_file):
    assert load_words(words_file) == ["DRAGON", "FIRE", "WINGS"]


def test_load_words_keeps_blank_lines(tmp_path):
    path = tmp_path / "w.txt"
    path.write_text("a\n\nb", encoding="utf-8")
    assert load_words(path) == ["A", "", "B"]


def test_load_words_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_words(tmp_path / "absent.txt")


def test_manager_starts_with_word_from_file(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(1))
    assert manager.current_word in {"DRAGON", "FIRE", "WINGS"}
    assert manager.typed_text == ""
    assert manager.word_timer == WORD_TIME_LIMIT
    assert manager.remaining == 2


def test_manager_falls_back_to_default_words(tmp_path):
    manager = WordManager(WORD_TIME_LIMIT, tmp_path / "absent.txt", random.Random(2))
    assert manager.current_word in DEFAULT_WORDS
    assert manager.remaining == len(DEFAULT_WORDS) - 1


def test_every_word_used_once_before_reshuffle(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(3))
    seen = [manager.current_word]
    for _ in range(2):
        manager.reset()
        seen.append(manager.current_word)
    assert sorted(seen) == ["DRAGON", "FIRE", "WINGS"]
    manager.reset()
    assert manager.current_word in seen
    assert manager.remaining == 2


def test_empty_word_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        WordManager(WORD_TIME_LIMIT, path, random.Random(0))


def test_update_counts_down_and_clamps(words_file):
    manager = WordManager(2.0, words_file, random.Random(0))
    manager.update(0.5)
    assert manager.word_timer == pytest.approx(1.5)
    assert not manager.time_up
    manager.update(10.0)
    assert manager.word_timer == 0
    assert manager.time_up


def test_reset_restores_timer_and_clears_text(words_file):
    manager = WordManager(2.0, words_file, random.Random(0))
    manager.update(1.0)
    manager.handle_input("a")
    manager.reset()
    assert manager.word_timer == 2.0
    assert manager.typed_text == ""


@pytest.mark.parametrize("key", [ord("a"), "a", ord("A")])
def test_handle_input_accepts_letters_uppercased(words_file, key):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    manager.handle_input(key)
    assert manager.typed_text == "A"


def test_handle_input_accepts_space(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    manager.handle_input(ord(" "))
    assert manager.typed_text == " "


@pytest.mark.parametrize("key", [0, ord("1"), "!", "é", -5, 300])
def test_handle_input_ignores_other_keys(words_file, key):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    manager.handle_input(key)
    assert manager.typed_text == ""


def test_backspace_removes_last_char_and_is_safe_when_empty(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    manager.handle_backspace()
    assert manager.typed_text == ""
    for char in "ab":
        manager.handle_input(char)
    manager.handle_backspace()
    assert manager.typed_text == "A"


def test_typing_whole_word_is_correct(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    word = manager.current_word
    for char in word[:-1]:
        manager.handle_input(char)
        assert manager.typed_prefix_correct
        assert not manager.word_correct
    manager.handle_input(word[-1])
    assert manager.word_correct


def test_wrong_prefix_detected(words_file):
    manager = WordManager(WORD_TIME_LIMIT, words_file, random.Random(0))
    manager.handle_input("q")
    assert not manager.typed_prefix_correct
    assert not manager.word_correct