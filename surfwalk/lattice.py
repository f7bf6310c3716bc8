"""Slope lattice of a one-dimensional surface carrying a single walker.

The surface is stored as a ring of slopes (each +1 or -1) together with the
heights they integrate to. A walker sits on one site and slides downhill,
choosing at random when it stands on a peak and staying put in a valley.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def alternating_slopes(size: int) -> list[int]:
    """Return a flat zig-zag surface: -1 on even sites, +1 on odd sites."""
    if size < 2:
        raise ValueError(f"lattice size must be at least 2, got {size}")
    return [-1 if i % 2 == 0 else 1 for i in range(size)]


def heights_from_slopes(slopes: Iterable[int]) -> list[float]:
    """Integrate slopes into heights, starting from zero at site 0."""
    heights: list[float] = []
    level = 0.0
    for slope in slopes:
        heights.append(level)
        level += slope
    return heights


def count_particles_at(particles: Iterable[int], site: int) -> int:
    """Count how many particles occupy ``site``."""
    return sum(1 for position in particles if position == site)


@dataclass
class SurfaceState:
    """A periodic surface of slopes and heights with one walker on it."""

    slopes: list[int]
    heights: list[float]
    particle: int

    def __post_init__(self) -> None:
        if len(self.slopes) < 2:
            raise ValueError("a surface needs at least two sites")
        if len(self.heights) != len(self.slopes):
            raise ValueError("heights and slopes must have the same length")
        if any(slope not in (-1, 1) for slope in self.slopes):
            raise ValueError("slopes must be +1 or -1")
        if not 0 <= self.particle < len(self.slopes):
            raise ValueError(f"particle position {self.particle} is off the lattice")

    @property
    def size(self) -> int:
        return len(self.slopes)

    @classmethod
    def flat(cls, size: int) -> SurfaceState:
        """A zig-zag flat surface with the walker in the middle."""
        slopes = alternating_slopes(size)
        return cls(slopes, heights_from_slopes(slopes), size // 2)

    def flip_bond(self, site: int) -> bool:
        """Exchange the slopes at ``site`` and the next site, if they differ.

        The height at the next site drops by 2 when a peak is flipped and rises
        by 2 when a valley is flipped. Returns whether anything changed.
        """
        size = self.size
        if not 0 <= site < size:
            raise IndexError(f"site {site} is off the lattice")
        nxt = (site + 1) % size
        left, right = self.slopes[site], self.slopes[nxt]
        if left == right:
            return False
        self.slopes[site], self.slopes[nxt] = right, left
        self.heights[nxt] -= 2 * left
        return True

    def push_behind_particle(self) -> bool:
        """Lift a valley under the walker into a peak; return whether it did."""
        site = (self.particle - 1) % self.size
        nxt = self.particle
        if self.slopes[site] == -1 and self.slopes[nxt] == 1:
            return self.flip_bond(site)
        return False

    def move_particle(self, rng: random.Random) -> int:
        """Slide the walker downhill, or pick a side at random on a peak.

        In a valley the walker stays. Returns the new position.
        """
        position = self.particle
        left = self.slopes[(position - 1) % self.size]
        right = self.slopes[position]
        if left == 1 and right == -1:
            step = 1 if rng.random() > 0.5 else -1
        elif left == -1 and right == -1:
            step = 1
        elif left == 1 and right == 1:
            step = -1
        else:
            step = 0
        self.particle = (position + step) % self.size
        return self.particle

    def mean_height(self) -> float:
        return sum(self.heights) / self.size

    def width_squared(self) -> float:
        """Sum of squared deviations of the heights from their mean."""
        mean = self.mean_height()
        return sum((mean - height) ** 2 for height in self.heights)