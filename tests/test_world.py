import random

from estudos.game.entities import SCREEN_HEIGHT, SCREEN_WIDTH, Keys, Laser, Meteor, Sprite
from estudos.game.geometry import Vector
from estudos.game.world import Game, Menu, SpriteSet


def _game(seed=1):
    sprites = SpriteSet(
        player=Sprite(40, 30),
        laser=Sprite(4, 10),
        meteors=[Sprite(20, 20)],
        stars=[Sprite(2, 2)],
        planets=[Sprite(60, 60)],
    )
    return Game(sprites, random.Random(seed))


def _started(seed=1):
    game = _game(seed)
    game.update(Keys(enter=True))
    return game


def test_menu_waits_for_enter():
    menu = Menu()
    menu.update(Keys(space=True))
    assert not menu.is_ready()
    menu.update(Keys(enter=True))
    assert menu.is_ready()


def test_layout_is_fixed_screen_size():
    assert Menu().layout(1, 1) == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert _game().layout(1920, 1080) == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_menu_phase_spawns_scenery_but_no_meteors():
    game = _game()
    for _ in range(200):
        game.update(Keys())
    assert not game.is_started
    assert game.stars
    assert game.planets
    assert game.meteors == []


def test_starting_clears_planets():
    game = _game()
    for _ in range(200):
        game.update(Keys())
    game.update(Keys(enter=True))
    assert game.is_started
    assert game.planets == []


def test_meteor_spawns_when_timer_fires():
    game = _started()
    for _ in range(game.meteor_spawn_timer.target_ticks - 1):
        game.update(Keys())
    assert game.meteors == []
    game.update(Keys())
    assert len(game.meteors) == 1


def test_laser_hit_removes_both_and_scores():
    game = _started()
    game.meteors.append(Meteor(Vector(100, 0), Vector(0, 0), Sprite(10, 10)))
    game.add_laser(Laser(Vector(100, 5), Sprite(4, 4)))
    game.update(Keys())
    assert game.meteors == []
    assert game.lasers == []
    assert game.score == 1


def test_one_laser_destroys_only_one_meteor():
    game = _started()
    game.meteors.append(Meteor(Vector(100, 0), Vector(0, 0), Sprite(10, 10)))
    game.meteors.append(Meteor(Vector(102, 0), Vector(0, 0), Sprite(10, 10)))
    game.add_laser(Laser(Vector(100, 5), Sprite(4, 4)))
    game.update(Keys())
    assert len(game.meteors) == 1
    assert game.lasers == []
    assert game.score == 1


def test_meteor_hitting_player_resets_round():
    game = _started()
    game.score = 5
    position = Vector(game.player.position.x, game.player.position.y)
    game.meteors.append(Meteor(position, Vector(0, 0), Sprite(10, 10)))
    game.update(Keys())
    assert game.meteors == []
    assert game.score == 0
    assert game.best_score == 5
    assert game.is_started


def test_reset_keeps_best_score():
    game = _started()
    game.score = 5
    game.reset()
    game.score = 2
    game.reset()
    assert game.best_score == 5
    assert game.score == 0


def test_reset_restores_player_and_clears_lasers():
    game = _started()
    start = Vector(game.player.position.x, game.player.position.y)
    game.update(Keys(left=True))
    game.add_laser(Laser(Vector(0, 0), Sprite(4, 4)))
    game.reset()
    assert game.player.position == start
    assert game.lasers == []
    assert game.meteor_spawn_timer.current_ticks == 0
    assert game.star_spawn_timer.current_ticks == 0


def test_same_seed_gives_same_stars():
    a, b = _game(7), _game(7)
    for _ in range(50):
        a.update(Keys())
        b.update(Keys())
    assert a.stars == b.stars