import pytest

from potionmaze.rng import PMRandom, pm_next, state_from_seed, M

def test_pm_next_reference_values():
    # Park–Miller minimal standard: 10000th value from seed 1 is 1043618065.
    s = 1
    for _ in range(10000):
        s = pm_next(s)
    assert s == 1043618065

def test_seed_mapping_stays_in_state_range():
    for seed in (0, 1, -1, -12345, M - 2, M - 1, M, 2**40):
        st = state_from_seed(seed)
        assert 1 <= st <= M - 1, f"seed {seed} -> bad state {st}"
    assert state_from_seed(0) != state_from_seed(1)

def test_same_seed_same_stream():
    a = PMRandom.from_seed(42)
    b = PMRandom.from_seed(42)
    assert [a.below(1000) for _ in range(50)] == [b.below(1000) for _ in range(50)]

def test_below_bounds_and_errors():
    r = PMRandom.from_seed(7)
    for n in (1, 2, 3, 10, 97):
        for _ in range(200):
            v = r.below(n)
            assert 0 <= v < n
    with pytest.raises(ValueError):
        r.below(0)

def test_choice_picks_from_sequence():
    r = PMRandom.from_seed(3)
    seq = ["up", "left", "right", "down"]
    picks = {r.choice(seq) for _ in range(200)}
    assert picks <= set(seq)
    assert len(picks) > 1
