"""Mean surface profile for a walker that biases the surface it stands on.

Each microstep picks a random bond; if the walker sits right after it, the
bond may flip with a probability set by ``beta``. Then a random site is
picked, and if it is the walker's site the walker takes a step.
"""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence
from os import PathLike

from surfwalk.lattice import SurfaceState, count_particles_at

DEFAULT_OUTPUT = "1p_profile256_w0_b1.0_t5000flat.dat"


def _logistic(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


def flip_probability(beta: float, occupancy: int, upward: bool) -> float:
    """Probability of flipping a bond next to ``occupancy`` walkers.

    Lowering a peak has probability 1/(1+exp(-2*beta*x)); raising a valley
    has exp(-2*beta*x)/(1+exp(-2*beta*x)).
    """
    z = 2.0 * beta * occupancy
    return _logistic(-z) if upward else _logistic(z)


def biased_surface_step(state: SurfaceState, beta: float, rng: random.Random) -> bool:
    """Try one surface update at a random bond; return whether it flipped."""
    size = state.size
    site = rng.randrange(size)
    occupancy = count_particles_at((state.particle,), (site + 1) % size)
    if occupancy == 0:
        return False
    left = state.slopes[site]
    if left == state.slopes[(site + 1) % size]:
        return False
    probability = flip_probability(beta, occupancy, upward=left == -1)
    if rng.random() < probability:
        return state.flip_bond(site)
    return False


def particle_attempt(state: SurfaceState, rng: random.Random) -> bool:
    """Pick a random site; if the walker is there, move it.

    Returns whether the walker was selected.
    """
    if rng.randrange(state.size) != state.particle:
        return False
    state.move_particle(rng)
    return True


def mean_profile(
    size: int = 256,
    sweeps: int = 5000,
    ensembles: int = 1000,
    beta: float = 1.0,
    rng: random.Random | None = None,
) -> list[float]:
    """Average the final height profile over independent runs from a flat start."""
    if ensembles < 1:
        raise ValueError("at least one ensemble member is required")
    if sweeps < 0:
        raise ValueError("number of sweeps cannot be negative")
    rng = rng if rng is not None else random.Random()
    totals = [0.0] * size
    for _ in range(ensembles):
        state = SurfaceState.flat(size)
        for _ in range(sweeps):
            for _ in range(size):
                biased_surface_step(state, beta, rng)
                particle_attempt(state, rng)
        totals = [total + height for total, height in zip(totals, state.heights)]
    return [total / ensembles for total in totals]


def write_profile(profile: Sequence[float], path: str | PathLike[str]) -> None:
    """Write ``site<TAB>height`` lines."""
    with open(path, "w", encoding="utf-8") as out:
        for site, height in enumerate(profile):
            out.write(f"{site}\t{height:g}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Mean surface profile under a biased walker."
    )
    parser.add_argument("--size", type=int, default=256)
    parser.add_argument("--sweeps", type=int, default=5000)
    parser.add_argument("--ensembles", type=int, default=1000)
    parser.add_argument("--beta", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        profile = mean_profile(
            args.size, args.sweeps, args.ensembles, args.beta, random.Random(args.seed)
        )
    except ValueError as exc:
        parser.error(str(exc))
    write_profile(profile, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())