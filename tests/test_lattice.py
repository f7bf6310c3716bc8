import random

import pytest

from surfwalk.lattice import (
    SurfaceState,
    alternating_slopes,
    count_particles_at,
    heights_from_slopes,
)


class ScriptedRng:
    def __init__(self, floats=()):
        self._floats = iter(floats)

    def random(self):
        return next(self._floats)

    def randrange(self, stop):
        raise AssertionError("randrange not expected")


def _consistent(state):
    return all(
        state.heights[i + 1] - state.heights[i] == state.slopes[i]
        for i in range(state.size - 1)
    )


def test_alternating_slopes_pattern():
    assert alternating_slopes(4) == [-1, 1, -1, 1]


def test_alternating_slopes_rejects_tiny():
    with pytest.raises(ValueError):
        alternating_slopes(1)


def test_heights_from_slopes_small():
    assert heights_from_slopes([-1, 1, -1, 1]) == [0.0, -1.0, 0.0, -1.0]


def test_heights_differences_match_slopes():
    slopes = [1, 1, -1, 1, -1, -1]
    heights = heights_from_slopes(slopes)
    assert heights[0] == 0
    assert [b - a for a, b in zip(heights, heights[1:])] == slopes[:-1]


def test_count_particles_at():
    assert count_particles_at([3, 3, 5], 3) == 2
    assert count_particles_at([3, 3, 5], 4) == 0


def test_flat_state():
    state = SurfaceState.flat(8)
    assert state.particle == 4
    assert state.slopes == alternating_slopes(8)
    assert _consistent(state)


def test_invalid_state_rejected():
    with pytest.raises(ValueError):
        SurfaceState([1, 2], [0.0, 1.0], 0)
    with pytest.raises(ValueError):
        SurfaceState([1, -1], [0.0], 0)
    with pytest.raises(ValueError):
        SurfaceState([1, -1], [0.0, 1.0], 2)


def test_flip_valley_raises_height():
    state = SurfaceState.flat(8)
    before = state.heights[1]
    assert state.flip_bond(0) is True
    assert state.slopes[:2] == [1, -1]
    assert state.heights[1] == before + 2
    assert _consistent(state)


def test_flip_peak_lowers_height():
    state = SurfaceState.flat(8)
    before = state.heights[2]
    assert state.flip_bond(1) is True
    assert state.heights[2] == before - 2
    assert _consistent(state)


def test_flip_equal_slopes_does_nothing():
    state = SurfaceState([1, 1, -1, -1], heights_from_slopes([1, 1, -1, -1]), 0)
    heights = list(state.heights)
    assert state.flip_bond(0) is False
    assert state.slopes == [1, 1, -1, -1]
    assert state.heights == heights


def test_flip_wraps_around():
    state = SurfaceState.flat(8)
    before = state.heights[0]
    assert state.flip_bond(7) is True
    assert state.slopes[7] == -1 and state.slopes[0] == 1
    assert state.heights[0] == before - 2
    assert _consistent(state)


def test_flip_out_of_range():
    with pytest.raises(IndexError):
        SurfaceState.flat(4).flip_bond(4)


def test_flips_conserve_slope_sum():
    state = SurfaceState.flat(16)
    rng = random.Random(3)
    for _ in range(200):
        state.flip_bond(rng.randrange(16))
    assert sum(state.slopes) == 0
    assert _consistent(state)


def test_push_skipped_on_peak():
    state = SurfaceState.flat(8)
    slopes = list(state.slopes)
    assert state.push_behind_particle() is False
    assert state.slopes == slopes


def test_push_lifts_valley():
    state = SurfaceState.flat(8)
    state.particle = 3
    before = state.heights[3]
    assert state.push_behind_particle() is True
    assert state.heights[3] == before + 2


def test_push_wraps_at_origin():
    state = SurfaceState.flat(8)
    state.particle = 0
    # slopes[7] == 1, slopes[0] == -1: a peak, nothing to lift
    assert state.push_behind_particle() is False
    state.flip_bond(7)
    before = state.heights[0]
    assert state.push_behind_particle() is True
    assert state.heights[0] == before + 2


@pytest.mark.parametrize("draw,expected", [(0.9, 5), (0.2, 3), (0.5, 3)])
def test_move_on_peak_uses_random(draw, expected):
    state = SurfaceState.flat(8)
    assert state.move_particle(ScriptedRng([draw])) == expected
    assert state.particle == expected


def test_move_in_valley_stays():
    state = SurfaceState.flat(8)
    state.particle = 3
    assert state.move_particle(ScriptedRng()) == 3


def test_move_downhill_both_ways():
    slopes = [-1, -1, 1, 1]
    state = SurfaceState(slopes, heights_from_slopes(slopes), 1)
    assert state.move_particle(ScriptedRng()) == 2
    state.particle = 3
    assert state.move_particle(ScriptedRng()) == 2


def test_move_wraps_both_ends():
    slopes = [-1, 1, 1, -1]
    state = SurfaceState(slopes, heights_from_slopes(slopes), 0)
    # at site 0: left slope (site 3) is -1, right is -1 -> moves right
    assert state.move_particle(ScriptedRng()) == 1
    slopes = [-1, -1, 1, 1]
    state = SurfaceState(slopes, heights_from_slopes(slopes), 0)
    # left slope (site 3) is +1, right is -1: a peak; low draw goes left
    assert state.move_particle(ScriptedRng([0.1])) == 3
    slopes = [-1, 1, 1, -1]
    state = SurfaceState(slopes, heights_from_slopes(slopes), 3)
    assert state.move_particle(ScriptedRng([0.9])) == 0


def test_width_of_level_surface_is_zero():
    state = SurfaceState([1, -1], [3.0, 3.0], 0)
    assert state.mean_height() == 3.0
    assert state.width_squared() == 0.0


def test_width_invariant_under_shift():
    state = SurfaceState.flat(8)
    width = state.width_squared()
    mean = state.mean_height()
    state.heights = [h + 10 for h in state.heights]
    assert state.width_squared() == pytest.approx(width)
    assert state.mean_height() == pytest.approx(mean + 10)
    assert width > 0