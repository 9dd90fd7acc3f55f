"""Walking enemies that patrol platforms."""

from __future__ import annotations

from collections.abc import Iterable

from .entities import GameObject, Platform

FALL_LIMIT = 700
EDGE_MARGIN = 10


class Enemy(GameObject):
    """A 40x40 walker that falls under gravity and turns at platform edges."""

    SIZE = 40
    GRAVITY = 0.5

    def __init__(self, x: float, y: float, speed: float, moving_right: bool) -> None:
        super().__init__(x, y, self.SIZE, self.SIZE)
        self.speed = float(speed)
        self.moving_right = bool(moving_right)
        self.gravity = self.GRAVITY
        self.velocity_y = 0.0
        self.grounded = False

    def update(self) -> None:
        """Walk one step in the current direction."""
        if self.moving_right:
            self.x += self.speed
        else:
            self.x -= self.speed

    def apply_gravity(self, platforms: Iterable[Platform]) -> None:
        """Fall, land on the first platform hit from above, and die below the world."""
        if not self.grounded:
            self.velocity_y += self.gravity

        self.y += self.velocity_y

        self.grounded = False
        for platform in platforms:
            if platform is None or not platform.active or not self.collides_with(platform):
                continue
            if self.velocity_y > 0 and self.y < platform.y:
                self.y = platform.y - self.height
                self.velocity_y = 0.0
                self.grounded = True
                self._turn_at_edge(platform)
                break

        if self.y > FALL_LIMIT:
            self.active = False

    def _turn_at_edge(self, platform: Platform) -> None:
        left = platform.x
        right = platform.x + platform.width
        center = self.x + self.width / 2

        if self.moving_right and center >= right - EDGE_MARGIN:
            self.moving_right = False
        elif not self.moving_right and center <= left + EDGE_MARGIN:
            self.moving_right = True