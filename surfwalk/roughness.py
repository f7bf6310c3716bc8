"""Surface roughness about the mean height under a surface-pushing walker.

Every step the walker lifts a valley behind it and slides downhill. At
regular intervals the squared deviation of the heights from their mean is
summed, and the result is averaged over sites and independent runs.
"""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from os import PathLike

from surfwalk.lattice import SurfaceState

DEFAULT_OUTPUT = "roughness_about_mean1024_mod.dat"


def roughness_about_mean(
    size: int = 1024,
    steps: int = 100000,
    ensembles: int = 10000,
    interval: int = 100,
    rng: random.Random | None = None,
) -> list[tuple[int, float]]:
    """Return ``(step, mean squared width)`` pairs sampled every ``interval`` steps."""
    if ensembles < 1:
        raise ValueError("at least one ensemble member is required")
    if steps < 0:
        raise ValueError("number of steps cannot be negative")
    if interval < 1:
        raise ValueError("sampling interval must be positive")
    rng = rng if rng is not None else random.Random()
    totals = [0.0] * (steps // interval + 1)
    for _ in range(ensembles):
        state = SurfaceState.flat(size)
        for step in range(steps + 1):
            state.push_behind_particle()
            state.move_particle(rng)
            if step % interval == 0:
                totals[step // interval] += state.width_squared()
    scale = float(size * ensembles)
    return [(sample * interval, total / scale) for sample, total in enumerate(totals)]


def write_roughness(series: Sequence[tuple[int, float]], path: str | PathLike[str]) -> None:
    """Write ``step<TAB>width`` lines."""
    with open(path, "w", encoding="utf-8") as out:
        for step, width in series:
            out.write(f"{step}\t{width:g}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Surface roughness about the mean under a pushing walker."
    )
    parser.add_argument("--size", type=int, default=1024)
    parser.add_argument("--steps", type=int, default=100000)
    parser.add_argument("--ensembles", type=int, default=10000)
    parser.add_argument("--interval", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        series = roughness_about_mean(
            args.size, args.steps, args.ensembles, args.interval, random.Random(args.seed)
        )
    except ValueError as exc:
        parser.error(str(exc))
    write_roughness(series, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())