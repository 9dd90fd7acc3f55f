"""Game state: the world, its objects, collision rules and the update loop."""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

from .enemy import Enemy
from .entities import Coin, Platform
from .player import SPAWN_X, SPAWN_Y, Player

UPDATE_INTERVAL = 1.0 / 60.0
INITIAL_WORLD_WIDTH = 2000.0
CAMERA_LEAD = 400.0
BOTTOM_PLATFORM_Y = 599.0
STOMP_TOLERANCE = 15.0


class GameModel:
    """Holds the world and advances it, optionally on a background thread."""

    def __init__(self, seed: int | None = None) -> None:
        self.player: Player | None = None
        self.platforms: list[Platform] = []
        self.enemies: list[Enemy] = []
        self.coins: list[Coin] = []
        self.camera_x = 0.0
        self.world_width = INITIAL_WORLD_WIDTH
        self.game_over = False
        self.running = False
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self.reset()

    @contextmanager
    def locked(self) -> Iterator[GameModel]:
        """Hold the data lock for the duration of the block."""
        with self._lock:
            yield self

    def start(self) -> None:
        """Start the 60 Hz update loop on a background thread."""
        if self.running:
            self.stop()

        self.running = True
        self.game_over = False
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def _run_loop(self) -> None:
        while not self.game_over and self.running:
            started = time.monotonic()
            self.update()
            elapsed = time.monotonic() - started
            if elapsed < UPDATE_INTERVAL:
                time.sleep(UPDATE_INTERVAL - elapsed)

    def stop(self) -> None:
        """End the game and wait for the update loop to finish."""
        self.game_over = True
        self.running = False
        thread = self._thread
        if thread is not None and thread.is_alive() and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def reset(self) -> None:
        """Rebuild the starting world, restarting the loop if it was running."""
        was_running = self.running
        if was_running:
            self.stop()

        with self._lock:
            self.platforms = []
            self.enemies = []
            self.coins = []

            self.player = Player(SPAWN_X, SPAWN_Y)
            self.player.reset()

            self.camera_x = 0.0
            self.world_width = INITIAL_WORLD_WIDTH
            self.game_over = False

            self.platforms.append(Platform(0, 550, 800, 20))

            self.enemies.append(Enemy(200, 510, 2, False))
            self.enemies.append(Enemy(400, 510, 2, True))
            self.enemies.append(Enemy(600, 510, 3, False))

            self._generate_world_segment(800, self.world_width)

        if was_running:
            self.start()

    def update(self) -> None:
        """Advance the world by one frame while the game is running."""
        if not self.running or self.game_over:
            return

        with self._lock:
            player = self.player
            if player is None:
                return

            player.update()

            for enemy in self.enemies:
                enemy.update()
                enemy.apply_gravity(self.platforms)

            if player.x > self.camera_x + CAMERA_LEAD:
                self.camera_x = player.x - CAMERA_LEAD

            if player.x > self.world_width - 1000:
                self.world_width += 1000
                self.generate_more_world()

            self.check_collisions()

            self.enemies = [enemy for enemy in self.enemies if enemy.active]
            self.coins = [coin for coin in self.coins if coin.active]

            if not player.active:
                self.game_over = True
                self.running = False

    def check_collisions(self) -> None:
        """Resolve player contacts with platforms, enemies and coins."""
        player = self.player
        if player is None:
            return

        for platform in self.platforms:
            if platform.active and player.collides_with(platform):
                if player.y + player.height > platform.y and player.y < platform.y:
                    player.set_position(player.x, platform.y - player.height)
                    player.stop_jump()

        for enemy in self.enemies:
            if not (enemy.active and player.collides_with(enemy)):
                continue
            player_bottom = player.y + player.height
            above_enemy = player_bottom <= enemy.y + STOMP_TOLERANCE
            falling = player.velocity_y > 1

            if above_enemy and falling:
                enemy.active = False
                player.add_coin()
            elif not player.invulnerable:
                player.take_damage()
                if player.lives <= 0:
                    self.game_over = True
                    self.running = False

        for coin in self.coins:
            if coin.active and player.collides_with(coin):
                player.add_coin()
                coin.active = False

    def generate_more_world(self) -> None:
        """Extend the level around the current world edge."""
        self._generate_world_segment(self.world_width - 500, self.world_width + 500)

    def _generate_world_segment(self, start_x: float, end_x: float) -> None:
        rand = self._rng.random
        current_x = float(start_x)
        last_height = 550.0

        self.platforms.append(
            Platform(current_x, BOTTOM_PLATFORM_Y, end_x - start_x + 500, 50)
        )

        while current_x < end_x:
            segment_width = 150 + rand() * 2
            segment_height = last_height - 50 + rand() * 120
            segment_height = max(350.0, min(580.0, segment_height))

            if segment_height < BOTTOM_PLATFORM_Y - 50:
                platform_width = 120 + rand() * 80
                self.platforms.append(Platform(current_x, segment_height, platform_width, 20))

                if rand() > 0.1:
                    for i in range(2):
                        self.coins.append(Coin(current_x + 20 + i * 40, segment_height - 50))

                if rand() > 0.43:
                    speed = 1.5 + rand() * 1.5
                    moving_right = rand() > 0.5
                    self.enemies.append(
                        Enemy(current_x + 30, segment_height - 40, speed, moving_right)
                    )

            current_x += segment_width
            last_height = segment_height