from dragontyping.player import MAX_LIVES, Player


def test_new_player_has_full_lives_and_no_score():
    player = Player(MAX_LIVES)
    assert player.lives == MAX_LIVES
    assert player.score == 0
    assert not player.is_game_over


def test_default_lives_match_max_lives():
    assert Player().lives == MAX_LIVES


def test_lose_life_until_game_over():
    player = Player(2)
    player.lose_life()
    assert player.lives == 1
    assert not player.is_game_over
    player.lose_life()
    assert player.lives == 0
    assert player.is_game_over


def test_lives_below_zero_is_still_game_over():
    player = Player(1)
    player.lose_life()
    player.lose_life()
    assert player.lives == -1
    assert player.is_game_over


def test_add_score_accumulates():
    player = Player()
    player.add_score(10)
    player.add_score(10)
    player.add_score(5)
    assert player.score == 25


def test_reset_restores_initial_state():
    player = Player(4)
    player.lose_life()
    player.add_score(30)
    player.reset()
    assert player.lives == 4
    assert player.score == 0