import math
import random
import threading

import pytest

from simplex3d import Simplex3D, NoiseParams, is_valid_permutation
from simplex3d.simplex import generate_noise


SAMPLE_POINTS = [(x * 0.731, x * 0.193 - 4.0, 2.5 - x * 0.417) for x in range(40)]


def test_reference_configuration_at_lattice_diagonal():
    gen = Simplex3D({"seed": 0, "octaves": 1, "amplitude": 1, "frequency": 1, "persistance": 0.5, "base": 0})
    a = gen.get_noise(0, 0, 0)
    b = gen.get_noise(1, 1, 1)
    assert math.isfinite(a) and math.isfinite(b)
    # Raw noise vanishes on the diagonal lattice, leaving only the base offset
    assert a == pytest.approx(0.5, abs=1e-9)
    assert b == pytest.approx(0.5, abs=1e-9)


def test_same_seed_same_values_across_instances():
    g1 = Simplex3D(seed=1234, octaves=3)
    g2 = Simplex3D(seed=1234, octaves=3)
    for pt in SAMPLE_POINTS:
        v = g1.get_noise(*pt)
        assert v == g1.get_noise(*pt)
        assert v == g2.get_noise(*pt)


def test_reseed_changes_field():
    gen = Simplex3D(seed=0)
    before = [gen.get_noise(*pt) for pt in SAMPLE_POINTS]
    gen.seed(1)
    after = [gen.get_noise(*pt) for pt in SAMPLE_POINTS]
    assert before != after
    gen.seed(0)
    assert [gen.get_noise(*pt) for pt in SAMPLE_POINTS] == before


def test_reseed_replaces_table():
    gen = Simplex3D()
    old = gen.perm
    gen.seed(-55)
    assert gen.perm is not old
    assert is_valid_permutation(gen.perm)
    with pytest.raises(ValueError):
        gen.perm[0] = 1
    assert "seed=-55" in repr(gen)


@pytest.mark.parametrize("seed", [0, -1, 2 ** 70])
def test_any_integer_seed(seed):
    gen = Simplex3D(seed=seed)
    assert is_valid_permutation(gen.perm)
    assert math.isfinite(gen.get_noise(0.5, -0.25, 3.0))


def test_single_octave_is_scaled_raw_noise():
    gen = Simplex3D(seed=9, amplitude=4.0, base=-1.0)
    for pt in SAMPLE_POINTS:
        assert gen.get_noise(*pt) == pytest.approx(gen.generate_noise(*pt) * 2.0 + 1.0)


def test_octave_sum_matches_manual_composition():
    gen = Simplex3D(seed=3, octaves=4, frequency=2.0, persistance=0.6, amplitude=3.0, base=5.0)
    for x, y, z in SAMPLE_POINTS:
        total = 0.0
        for o in range(4):
            f = 2.0 ** o
            total += gen.generate_noise(x * f, y * f, z * f) * 0.6 ** o
        assert gen.get_noise(x, y, z) == pytest.approx(total * gen.scale + gen.base_offset)


def test_default_output_range():
    gen = Simplex3D()
    rng = random.Random(5)
    for _ in range(2000):
        v = gen.generate_noise(rng.uniform(-64, 64), rng.uniform(-64, 64), rng.uniform(-64, 64))
        assert -1.0 - 1e-6 <= v <= 1.0 + 1e-6


@pytest.mark.parametrize("octaves", [1, 2, 4, 8])
def test_octaves_stay_within_base_and_amplitude(octaves):
    gen = Simplex3D(seed=77, octaves=octaves, frequency=2.0, persistance=0.5, amplitude=10.0, base=100.0)
    rng = random.Random(octaves)
    vals = [gen.get_noise(rng.uniform(-30, 30), rng.uniform(-30, 30), rng.uniform(-30, 30))
            for _ in range(1500)]
    assert min(vals) >= 100.0 - 1e-6
    assert max(vals) <= 110.0 + 1e-6
    assert max(vals) - min(vals) > 1.0


def test_continuity_of_octave_noise():
    gen = Simplex3D(seed=21, octaves=3, frequency=2.0)
    rng = random.Random(21)
    for _ in range(300):
        p = [rng.uniform(-10, 10) for _ in range(3)]
        q = [p[0], p[1] + 1e-4, p[2]]
        assert abs(gen.get_noise(*p) - gen.get_noise(*q)) < 1e-2


def test_params_instance_and_overrides():
    params = NoiseParams(octaves=2, seed=4)
    gen = Simplex3D(params)
    assert gen.params is params
    assert gen.octaves == 2
    tweaked = Simplex3D(params, octaves=5)
    assert tweaked.octaves == 5
    assert tweaked.params.seed == 4


def test_properties_mirror_params():
    gen = Simplex3D(octaves=2, amplitude=8.0, frequency=1.5, persistance=3.0, base=2.0)
    assert gen.octaves == 2
    assert gen.amplitude == 8.0
    assert gen.frequency == 1.5
    assert gen.persistance == 1.0
    assert gen.base == 2.0
    assert gen.scale == pytest.approx(8.0)
    assert gen.base_offset == pytest.approx(6.0)


def test_unknown_keyword_rejected():
    with pytest.raises(TypeError):
        Simplex3D(lacunarity=2.0)


def test_independent_generators():
    a = Simplex3D(seed=1)
    b = Simplex3D(seed=2)
    va = a.get_noise(0.3, 0.6, 0.9)
    b.seed(99)
    assert a.get_noise(0.3, 0.6, 0.9) == va


def test_readers_never_see_partial_table():
    gen = Simplex3D(seed=0)
    pt = (3.3, -1.7, 0.45)
    allowed = set()
    for s in (0, 1):
        gen.seed(s)
        allowed.add(gen.get_noise(*pt))
    seen = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            seen.append(gen.get_noise(*pt))

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for i in range(50):
        gen.seed(i % 2)
    stop.set()
    for t in threads:
        t.join()
    assert set(seen) <= allowed


def test_module_function_matches_method():
    gen = Simplex3D(seed=12)
    assert gen.generate_noise(0.1, 0.2, 0.3) == generate_noise(gen.perm, 0.1, 0.2, 0.3)


def test_overflowing_coordinates_fall_back_to_base_offset():
    gen = Simplex3D()
    v = gen.get_noise(1e308, 1e308, 1e308)
    assert math.isfinite(v)
    assert v == pytest.approx(gen.base_offset)


def test_many_octaves_stop_once_coordinates_overflow():
    gen = Simplex3D(octaves=1100, frequency=2.0)
    v = gen.get_noise(0.5, 0.25, 0.125)
    assert math.isfinite(v)
    assert gen.base <= v <= gen.base + gen.amplitude
