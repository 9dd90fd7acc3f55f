"""Basic world objects: the shared rectangle base, platforms and coins."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameObject(ABC):
    """An axis-aligned rectangle in world coordinates that can be switched off."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.active = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, "
            f"width={self.width!r}, height={self.height!r}, active={self.active!r})"
        )

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_size(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def collides_with(self, other: GameObject) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class Platform(GameObject):
    """A static block that objects stand on."""

    def update(self) -> None:
        """Platforms do not move."""


class Coin(GameObject):
    """A 20x20 collectible."""

    SIZE = 20

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, self.SIZE, self.SIZE)

    def update(self) -> None:
        """Coins do not move."""