"""The game state: title menu, spawning, collisions and scoring."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from estudos.game.entities import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Keys,
    Laser,
    Meteor,
    Planet,
    Player,
    Sprite,
    Star,
)
from estudos.game.timer import DEFAULT_TPS, Timer

METEOR_SPAWN_MS = 1000
STAR_SPAWN_MS = 500
PLANET_SPAWN_MS = 7000


class Menu:
    """The title screen; becomes ready once Enter is pressed."""

    def __init__(self) -> None:
        self.ready_to_play = False

    def update(self, keys: Keys) -> None:
        if keys.enter:
            self.ready_to_play = True

    def is_ready(self) -> bool:
        return self.ready_to_play

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        return SCREEN_WIDTH, SCREEN_HEIGHT


@dataclass(frozen=True)
class SpriteSet:
    """The sprites the game draws entities with."""

    player: Sprite
    laser: Sprite
    meteors: Sequence[Sprite]
    stars: Sequence[Sprite]
    planets: Sequence[Sprite]


class Game:
    """One game session, advanced one frame per ``update``."""

    def __init__(self, sprites: SpriteSet, rng: random.Random | None = None,
                 tps: int = DEFAULT_TPS) -> None:
        self.sprites = sprites
        self.rng = rng if rng is not None else random.Random()
        self.tps = tps
        self.meteor_spawn_timer = Timer(METEOR_SPAWN_MS, tps)
        self.star_spawn_timer = Timer(STAR_SPAWN_MS, tps)
        self.planet_spawn_timer = Timer(PLANET_SPAWN_MS, tps)
        self.menu = Menu()
        self.player = self._new_player()
        self.meteors: list[Meteor] = []
        self.stars: list[Star] = []
        self.planets: list[Planet] = []
        self.lasers: list[Laser] = []
        self.is_started = False
        self.score = 0
        self.best_score = 0

    def _new_player(self) -> Player:
        return Player(self.sprites.player, self.sprites.laser, self.add_laser, self.tps)

    def update(self, keys: Keys) -> None:
        self.star_spawn_timer.update()
        if self.star_spawn_timer.is_ready():
            self.star_spawn_timer.reset()
            self.stars.append(Star.spawn(self.sprites.stars, self.rng))
        for star in self.stars:
            star.update()

        if not self.is_started:
            self._update_menu(keys)
            return

        self.player.update(keys)

        self.meteor_spawn_timer.update()
        if self.meteor_spawn_timer.is_ready():
            self.meteor_spawn_timer.reset()
            self.meteors.append(Meteor.spawn(self.sprites.meteors, self.rng))

        for meteor in self.meteors:
            meteor.update()
        for laser in self.lasers:
            laser.update()

        self._resolve_hits()

        player_box = self.player.collider()
        if any(meteor.collider().intersects(player_box) for meteor in self.meteors):
            self.reset()

    def _update_menu(self, keys: Keys) -> None:
        self.menu.update(keys)
        if self.menu.is_ready():
            self.planets = []
            self.is_started = True

        self.planet_spawn_timer.update()
        if self.planet_spawn_timer.is_ready():
            self.planet_spawn_timer.reset()
            self.planets.append(Planet.spawn(self.sprites.planets, self.rng))
        for planet in self.planets:
            planet.update()

    def _resolve_hits(self) -> None:
        """Remove each meteor hit by a laser together with that laser."""
        survivors = []
        for meteor in self.meteors:
            box = meteor.collider()
            hit = next((i for i, laser in enumerate(self.lasers)
                        if box.intersects(laser.collider())), None)
            if hit is None:
                survivors.append(meteor)
            else:
                del self.lasers[hit]
                self.score += 1
        self.meteors = survivors

    def add_laser(self, laser: Laser) -> None:
        self.lasers.append(laser)

    def reset(self) -> None:
        """Start a new round, keeping the best score."""
        self.player = self._new_player()
        self.meteors = []
        self.lasers = []
        self.meteor_spawn_timer.reset()
        self.star_spawn_timer.reset()
        if self.score >= self.best_score:
            self.best_score = self.score
        self.score = 0

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        return SCREEN_WIDTH, SCREEN_HEIGHT