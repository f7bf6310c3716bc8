# surfwalk

Monte Carlo simulations of a single walker on a fluctuating
one-dimensional surface with periodic boundaries.

The surface is a ring of slopes, each `+1` or `-1`, and starts out flat as
an alternating zig-zag (`-1` on even sites, `+1` on odd sites). Heights are
obtained by summing slopes from zero at site 0. The walker starts in the
middle of the ring. It slides downhill, picks a side at random on a local
peak, and stays put in a valley.

Three studies are provided:

- **Mean surface profile** (`surfwalk.profile`): each microstep picks a
  random bond; if the walker sits on the site just after it, the bond may
  flip. Lowering a peak happens with probability `1/(1+exp(-2*beta*x))`,
  raising a valley with `exp(-2*beta*x)/(1+exp(-2*beta*x))`, where `x` is
  the number of walkers on that site. A random site is then picked, and if
  it is the walker's site the walker moves. The final height profile is
  averaged over independent runs.
- **Return statistics** (`surfwalk.returnstat`): at every step the walker
  lifts a valley directly behind it into a peak, then moves. Each return to
  the starting site is tallied by the step it lands on, the step the walker
  last left from, and the number of steps spent away.
- **Roughness about the mean** (`surfwalk.roughness`): the same pushing
  walker; every `interval` steps the sum of squared deviations of the
  heights from their mean is recorded, then divided by the number of sites
  and of runs.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

Only the Python standard library is needed; Python 3.10 or newer.

## Command line

Each study has its own command, which runs the simulation and writes a
tab-separated data file. All take `--seed` (an integer for a reproducible
run) and `--output` (the file to write).

```
surfwalk-profile    [--size 256]  [--sweeps 5000]  [--ensembles 1000]   [--beta 1.0]
surfwalk-returnstat [--size 8000] [--steps 50000]  [--ensembles 100000]
surfwalk-roughness  [--size 1024] [--steps 100000] [--ensembles 10000]  [--interval 100]
```

The values shown are the defaults; they make long runs. Default output
files are `1p_profile256_w0_b1.0_t5000flat.dat`,
`t_away_stats8000_mod1.dat` and `roughness_about_mean1024_mod.dat`.

Output formats:

- profile: `site<TAB>mean height`
- return statistics: `step<TAB>away<TAB>start<TAB>return`, each column
  divided by the total number of returns; the command also prints that
  total. It fails if no return was recorded.
- roughness: `step<TAB>mean squared width`

## Library use

Every simulation takes a `random.Random`, so a run can be reproduced by
seeding it.

```python
import random

from surfwalk.lattice import SurfaceState
from surfwalk.profile import mean_profile, write_profile
from surfwalk.returnstat import return_statistics, write_return_stats
from surfwalk.roughness import roughness_about_mean, write_roughness

rng = random.Random(1234)

# Average height profile on a ring of 64 sites.
profile = mean_profile(64, 200, 50, 1.0, rng)
write_profile(profile, "profile.dat")

# Excursion and return times of the walker.
stats = return_statistics(64, 500, 100, rng)
print(stats.returns)
away, start, returned = stats.normalised()
write_return_stats(stats, "returns.dat")

# Squared width about the mean height, sampled every 100 steps.
series = roughness_about_mean(64, 1000, 20, 100, rng)
write_roughness(series, "roughness.dat")
```

The lattice can also be driven by hand:

```python
state = SurfaceState.flat(16)
state.push_behind_particle()   # lift a valley behind the walker
state.move_particle(rng)       # returns the new position
state.flip_bond(3)             # swap slopes at sites 3 and 4 if they differ
print(state.particle, state.mean_height(), state.width_squared())
```

`surfwalk.profile` also exposes its single steps: `flip_probability`,
`biased_surface_step` and `particle_attempt`.

Helpers in `surfwalk.lattice`: `alternating_slopes(size)` gives the flat
zig-zag surface, `heights_from_slopes(slopes)` integrates slopes into
heights, and `count_particles_at(particles, site)` counts the particles on
a site.

Invalid settings (fewer than two sites, no runs, a negative number of
steps, a non-positive interval) raise `ValueError`; the commands report
them as usage errors.

## What it does not do

The package only produces data files and Python values; it does not plot
or fit the results, and it simulates one walker only.