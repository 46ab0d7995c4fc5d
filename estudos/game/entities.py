"""The things that move on the game screen: the player, lasers and scenery."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from estudos.game.geometry import Rect, Vector
from estudos.game.timer import DEFAULT_TPS, Timer

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

LASER_SPEED = 7.0
PLAYER_SPEED = 6.0
SHOOT_COOLDOWN_MS = 500
ROTATION_SPEED_MIN = -0.02
ROTATION_SPEED_MAX = 0.02
METEOR_MAX_SPEED = 13.0
PLANET_SPEED = 2.0
STAR_SPEED = 6.0

_RNG = random.Random()


@dataclass(frozen=True)
class Sprite:
    """The size of an image drawn for an entity."""

    width: int
    height: int
    name: str = ""


@dataclass(frozen=True)
class Keys:
    """Keyboard state for one frame; ``space`` means pressed on this frame."""

    left: bool = False
    right: bool = False
    space: bool = False
    enter: bool = False


def _pick(sprites: Sequence[Sprite], rng: random.Random) -> Sprite:
    if not sprites:
        raise ValueError("no sprites to choose from")
    return sprites[rng.randrange(len(sprites))]


def _box(position: Vector, sprite: Sprite) -> Rect:
    return Rect(position.x, position.y, float(sprite.width), float(sprite.height))


@dataclass
class Laser:
    """A shot travelling up the screen."""

    position: Vector
    sprite: Sprite

    @classmethod
    def create(cls, position: Vector, sprite: Sprite) -> "Laser":
        """Create a laser centred on ``position``."""
        return cls(
            Vector(position.x - sprite.width / 2, position.y - sprite.height / 2),
            sprite,
        )

    def update(self) -> None:
        self.position.y -= LASER_SPEED

    def collider(self) -> Rect:
        return _box(self.position, self.sprite)


@dataclass
class _Drifter:
    position: Vector
    movement: Vector
    sprite: Sprite
    rotation_speed: float = 0.0
    rotation: float = 0.0

    def _drift(self) -> None:
        self.position.x += self.movement.x
        self.position.y += self.movement.y
        self.rotation += self.rotation_speed


@dataclass
class Meteor(_Drifter):
    """A spinning rock falling at a random speed."""

    @classmethod
    def spawn(cls, sprites: Sequence[Sprite], rng: random.Random | None = None) -> "Meteor":
        rng = rng if rng is not None else _RNG
        position = Vector(rng.random() * SCREEN_WIDTH, -100.0)
        movement = Vector(0.0, rng.random() * METEOR_MAX_SPEED)
        sprite = _pick(sprites, rng)
        spin = ROTATION_SPEED_MIN + rng.random() * (ROTATION_SPEED_MAX - ROTATION_SPEED_MIN)
        return cls(position, movement, sprite, rotation_speed=spin)

    def update(self) -> None:
        """Move one frame and spin."""
        self._drift()

    def collider(self) -> Rect:
        return _box(self.position, self.sprite)


@dataclass
class Planet(_Drifter):
    """A slow background planet shown behind the menu."""

    @classmethod
    def spawn(cls, sprites: Sequence[Sprite], rng: random.Random | None = None) -> "Planet":
        rng = rng if rng is not None else _RNG
        position = Vector(rng.random() * SCREEN_WIDTH, -500.0)
        return cls(position, Vector(0.0, PLANET_SPEED), _pick(sprites, rng))

    def update(self) -> None:
        """Move one frame."""
        self._drift()


@dataclass
class Star(_Drifter):
    """A background star streaking down the screen."""

    @classmethod
    def spawn(cls, sprites: Sequence[Sprite], rng: random.Random | None = None) -> "Star":
        rng = rng if rng is not None else _RNG
        position = Vector(rng.random() * SCREEN_WIDTH, -100.0)
        return cls(position, Vector(0.0, STAR_SPEED), _pick(sprites, rng))

    def update(self) -> None:
        """Move one frame."""
        self._drift()


class Player:
    """The ship: moves sideways and fires lasers with a cooldown."""

    def __init__(self, sprite: Sprite, laser_sprite: Sprite,
                 add_laser: Callable[[Laser], None], tps: int = DEFAULT_TPS) -> None:
        self.sprite = sprite
        self.laser_sprite = laser_sprite
        self.add_laser = add_laser
        self.rotation = 0.0
        self.position = Vector(SCREEN_WIDTH / 2 - sprite.width / 2, SCREEN_HEIGHT - 170.0)
        self.shoot_cooldown = Timer(SHOOT_COOLDOWN_MS, tps)

    def update(self, keys: Keys) -> None:
        if keys.left:
            self.position.x -= PLAYER_SPEED
        elif keys.right:
            self.position.x += PLAYER_SPEED

        self.shoot_cooldown.update()
        if self.shoot_cooldown.is_ready() and keys.space:
            self.shoot_cooldown.reset()
            spawn = Vector(
                self.position.x + self.sprite.width / 2,
                self.position.y - self.sprite.height / 4,
            )
            self.add_laser(Laser.create(replace(spawn), self.laser_sprite))

    def collider(self) -> Rect:
        return _box(self.position, self.sprite)