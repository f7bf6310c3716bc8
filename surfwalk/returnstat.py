"""Return-time statistics of a walker that pushes the surface behind it.

At every step the walker first lifts a valley directly behind it into a
peak, then slides downhill. Each time it comes back to its starting site the
step of the return, the step it last left from and the time spent away are
tallied.
"""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from surfwalk.lattice import SurfaceState

DEFAULT_OUTPUT = "t_away_stats8000_mod1.dat"


@dataclass
class ReturnStats:
    """Histograms indexed by step, plus the total number of returns.

    ``away[t]`` counts returns after ``t`` steps away, ``start[t]`` counts
    departures from the home site at step ``t`` and ``returned[t]`` counts
    returns landing on step ``t``.
    """

    away: list[float]
    start: list[float]
    returned: list[float]
    returns: int

    def normalised(self) -> tuple[list[float], list[float], list[float]]:
        """Each histogram divided by the number of returns."""
        if self.returns <= 0:
            raise ValueError("no returns were recorded; cannot normalise")
        scale = float(self.returns)
        return (
            [value / scale for value in self.away],
            [value / scale for value in self.start],
            [value / scale for value in self.returned],
        )


def return_statistics(
    size: int = 8000,
    steps: int = 50000,
    ensembles: int = 100000,
    rng: random.Random | None = None,
) -> ReturnStats:
    """Run independent walks from a flat surface and tally returns home."""
    if ensembles < 1:
        raise ValueError("at least one ensemble member is required")
    if steps < 0:
        raise ValueError("number of steps cannot be negative")
    rng = rng if rng is not None else random.Random()
    away = [0.0] * (steps + 1)
    start = [0.0] * (steps + 1)
    returned = [0.0] * (steps + 1)
    returns = 0
    home = size // 2
    for _ in range(ensembles):
        state = SurfaceState.flat(size)
        departed = 0
        for step in range(1, steps + 1):
            if step != 1 and state.particle == home:
                departed = step - 1
                start[departed] += 1.0
            state.push_behind_particle()
            state.move_particle(rng)
            if state.particle == home:
                returned[step] += 1.0
                away[step - departed] += 1.0
                returns += 1
    return ReturnStats(away, start, returned, returns)


def write_return_stats(stats: ReturnStats, path: str | PathLike[str]) -> None:
    """Write ``step<TAB>away<TAB>start<TAB>return`` lines, normalised."""
    away, start, returned = stats.normalised()
    with open(path, "w", encoding="utf-8") as out:
        for step, (a, s, r) in enumerate(zip(away, start, returned)):
            out.write(f"{step}\t{a:g}\t{s:g}\t{r:g}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Return-time statistics of a surface-pushing walker."
    )
    parser.add_argument("--size", type=int, default=8000)
    parser.add_argument("--steps", type=int, default=50000)
    parser.add_argument("--ensembles", type=int, default=100000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        stats = return_statistics(
            args.size, args.steps, args.ensembles, random.Random(args.seed)
        )
        write_return_stats(stats, args.output)
    except ValueError as exc:
        parser.error(str(exc))
    print(stats.returns)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())