"""The player character."""

from __future__ import annotations

from .entities import GameObject

SPAWN_X = 100
SPAWN_Y = 300
FALL_LIMIT = 700
FRAME_TIME = 1.0 / 60.0


class Player(GameObject):
    """A 30x50 character that runs, jumps, collects coins and can be hurt."""

    WIDTH = 30
    HEIGHT = 50
    GRAVITY = 0.5
    JUMP_VELOCITY = -12.0
    RUN_SPEED = 15.0
    FRICTION = 0.8
    MAX_FALL_SPEED = 15.0
    INVULNERABILITY_TIME = 2.0

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, self.WIDTH, self.HEIGHT)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.gravity = self.GRAVITY
        self.jumping = True
        self.lives = 1
        self.coins = 0
        self.invulnerable = False
        self.invulnerability_timer = 0.0

    def jump(self) -> None:
        if not self.jumping:
            self.velocity_y = self.JUMP_VELOCITY
            self.jumping = True

    def move_left(self) -> None:
        self.velocity_x = -self.RUN_SPEED

    def move_right(self) -> None:
        self.velocity_x = self.RUN_SPEED

    def stop(self) -> None:
        """Slow the horizontal motion down."""
        self.velocity_x *= self.FRICTION

    def add_coin(self) -> None:
        self.coins += 1

    def take_damage(self) -> None:
        """Lose a life unless invulnerable; respawn or deactivate afterwards."""
        if self.invulnerable:
            return

        self.lives -= 1
        self.set_invulnerable(True, self.INVULNERABILITY_TIME)

        if self.lives > 0:
            self.respawn()
        else:
            self.active = False

    def respawn(self) -> None:
        self.x = float(SPAWN_X)
        self.y = float(SPAWN_Y)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.jumping = False

    def stop_jump(self) -> None:
        """Cancel upward motion and allow another jump."""
        if self.velocity_y < 0:
            self.velocity_y = 0.0
        self.jumping = False

    def set_invulnerable(self, invulnerable: bool, duration: float = INVULNERABILITY_TIME) -> None:
        self.invulnerable = bool(invulnerable)
        self.invulnerability_timer = float(duration) if invulnerable else 0.0

    def update(self) -> None:
        """Advance one frame: invulnerability timer, gravity, motion and falling out."""
        if self.invulnerable:
            self.invulnerability_timer -= FRAME_TIME
            if self.invulnerability_timer <= 0.0:
                self.set_invulnerable(False)

        self.velocity_y += self.gravity

        self.x += self.velocity_x
        self.y += self.velocity_y

        if self.velocity_y > self.MAX_FALL_SPEED:
            self.velocity_y = self.MAX_FALL_SPEED

        if self.y > FALL_LIMIT:
            self.take_damage()
            if self.lives > 0:
                self.set_position(SPAWN_X, SPAWN_Y)
                self.velocity_x = 0.0
                self.velocity_y = 0.0
                self.jumping = False

    def reset(self) -> None:
        """Return to the starting state of a new game."""
        self.set_position(SPAWN_X, SPAWN_Y)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.jumping = False
        self.lives = 1
        self.coins = 0
        self.invulnerable = False
        self.invulnerability_timer = 0.0
        self.active = True