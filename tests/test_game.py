import random

import pytest

from meyvekes.game import (
    BANANA_INTERVAL_MS,
    BANANA_START_Y,
    BANANA_X_LIMIT,
    COUNTDOWN_START,
    REMOVE_DELAY_MS,
    FruitKind,
    Game,
    GameResult,
)


def make_game(coordinates=(), high_score=0, height=800):
    return Game(coordinates, high_score, height, random.Random(0))


def test_watermelon_falls_step_per_interval():
    game = make_game()
    fruit = game.spawn_watermelon(10, 0)
    game.advance(FruitKind.WATERMELON.fall_interval_ms * 3)
    assert fruit.y == FruitKind.WATERMELON.fall_step * 3
    assert fruit.x == 10


def test_watermelon_leaving_screen_is_missed():
    game = make_game(height=800)
    fruit = game.spawn_watermelon(0, 790)
    game.advance(FruitKind.WATERMELON.fall_interval_ms)
    assert not fruit.alive
    assert game.fruits == []
    assert game.missed == 1


def test_watermelon_click_stops_and_removes_later():
    game = make_game()
    fruit = game.spawn_watermelon(0, 200)
    assert game.click(fruit) == FruitKind.WATERMELON.points
    assert fruit.hit
    y = fruit.y
    game.advance(REMOVE_DELAY_MS - 1)
    assert fruit.y == y
    assert fruit in game.fruits
    game.advance(1)
    assert fruit not in game.fruits


def test_repeated_clicks_keep_scoring():
    game = make_game()
    fruit = game.spawn_watermelon(0, 200)
    game.click(fruit)
    game.click(fruit)
    assert game.cut == FruitKind.WATERMELON.points * 2


def test_banana_spawn_position_and_points():
    game = make_game()
    fruit = game.spawn_banana()
    assert 0 <= fruit.x < BANANA_X_LIMIT
    assert fruit.y == BANANA_START_Y
    game.click(fruit)
    assert game.cut == FruitKind.BANANA.points


def test_clicked_banana_keeps_falling():
    game = make_game()
    fruit = game.spawn_banana()
    game.click(fruit)
    game.advance(FruitKind.BANANA.fall_interval_ms)
    assert fruit.y == BANANA_START_Y + FruitKind.BANANA.fall_step


def test_banana_leaving_screen_is_not_missed():
    game = make_game(height=150)
    fruit = game.spawn_banana()
    game.advance(FruitKind.BANANA.fall_interval_ms * 3)
    assert not fruit.alive
    assert game.missed == 0


def test_banana_spawned_periodically():
    game = make_game()
    game.advance(BANANA_INTERVAL_MS - 1)
    assert game.fruits == []
    game.advance(1)
    assert [f.kind for f in game.fruits] == [FruitKind.BANANA]


def test_coordinates_spawn_one_per_second_skipping_invalid():
    game = make_game([(5, 6), None, (7, 8)])
    game.advance(1000)
    assert [(f.x, f.y) for f in game.fruits] == [(5, 6)]
    game.advance(1000)
    assert len(game.fruits) == 1
    game.advance(1000)
    assert [f.x for f in game.fruits] == [5, 7]


def test_clicking_removed_fruit_raises():
    game = make_game(height=800)
    fruit = game.spawn_watermelon(0, 790)
    game.advance(FruitKind.WATERMELON.fall_interval_ms)
    with pytest.raises(ValueError):
        game.click(fruit)


def test_countdown_ends_game():
    game = make_game()
    assert game.advance(COUNTDOWN_START * 1000 - 1) is None
    result = game.advance(1)
    assert game.remaining == 0
    assert game.finished
    assert result == game.result


def test_click_after_finish_raises():
    game = make_game()
    fruit = game.spawn_watermelon(0, 0)
    game.finish()
    with pytest.raises(RuntimeError):
        game.click(fruit)


def test_new_record_updates_high_score():
    game = make_game(high_score=0)
    game.click(game.spawn_banana())
    result = game.finish()
    assert result.new_record
    assert game.high_score == game.cut
    assert result.message()[0] == "Tebrikler!"


def test_no_record_keeps_high_score():
    game = make_game(high_score=50)
    result = game.finish()
    assert not result.new_record
    assert result.high_score == 50
    assert result.message()[0] == "Süre Bitti"


def test_finish_is_idempotent():
    game = make_game()
    first = game.finish()
    game.advance(5000)
    assert game.finish() is first


def test_message_text_for_record():
    text = GameResult(cut=7, missed=3, high_score=7, new_record=True).message()[1]
    assert text == (
        "Süre doldu!\nYeni en yüksek skor: 7\n"
        "Kesilen karpuz sayısı: 7\nKaçırılan karpuz sayısı: 3"
    )


def test_negative_advance_rejected():
    with pytest.raises(ValueError):
        make_game().advance(-1)