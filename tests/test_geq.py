import math

import pytest

from jamctl.geq import (
    EQ_BANDS,
    GraphicEQ,
    SplineLengthError,
    band_frequencies,
    db_to_lin,
)

RATE = 48000.0
BINS = 1024


@pytest.fixture
def eq():
    return GraphicEQ(RATE, BINS)


def _curve(eq, log_gain):
    n = eq.spline_length
    x = [i * RATE / (BINS + 0.5) for i in range(n)]
    y = [log_gain] * n
    return x, y


def test_db_to_lin_unity_and_round_trip():
    assert db_to_lin(0.0) == pytest.approx(1.0)
    for db in (-12.0, -3.0, 6.0, 11.5):
        assert 20.0 * math.log10(db_to_lin(db)) == pytest.approx(db)


def test_band_frequencies():
    freqs = band_frequencies()
    assert len(freqs) == EQ_BANDS
    assert freqs[16] == pytest.approx(1000.0)
    assert all(a < b for a, b in zip(freqs, freqs[1:]))
    assert freqs[26] / freqs[16] == pytest.approx(10.0)


def test_initial_state_is_flat(eq):
    freqs, gains = eq.freqs_and_gains()
    assert len(freqs) == len(gains) == EQ_BANDS
    assert all(g == 1.0 for g in gains)
    assert all(c == pytest.approx(1.0) for c in eq.coefs)
    assert eq.slider(0) == 0.0


def test_bin_mapping_invariants(eq):
    base = eq.bin_base
    delta = eq.bin_delta
    assert len(base) == len(delta) == BINS // 2
    assert all(0 <= d <= 1 for d in delta)
    assert base == sorted(base)
    assert base[-1] == EQ_BANDS - 1


def test_set_band_gain_updates_slider_and_gain(eq):
    assert eq.set_band_gain(10, 6.0) == 6.0
    assert eq.slider(10) == 6.0
    _, gains = eq.freqs_and_gains()
    assert gains[10] == pytest.approx(db_to_lin(6.0))


def test_coefs_stay_within_gain_bounds(eq):
    for band in range(EQ_BANDS):
        eq.set_band_gain(band, (band % 5) * 2.0 - 4.0)
    _, gains = eq.freqs_and_gains()
    low, high = min(gains + [1.0]), max(gains + [1.0])
    for c in eq.coefs:
        assert low - 1e-12 <= c <= high + 1e-12
    assert eq.coefs[0] == 1.0


def test_slider_out_of_range(eq):
    with pytest.raises(IndexError):
        eq.slider(EQ_BANDS)
    with pytest.raises(IndexError):
        eq.set_band_gain(-1, 0.0)


def test_set_coefs_short_curve(eq):
    with pytest.raises(SplineLengthError) as info:
        eq.set_coefs([1.0, 2.0], [0.0, 0.0])
    assert info.value.expected == BINS // 2 - 1
    assert info.value.length == 2


def test_set_coefs_places_values_per_bin(eq):
    x, y = _curve(eq, 0.0)
    y[5] = 1.0
    eq.set_coefs(x, y)
    assert eq.coefs[5] == pytest.approx(10.0)
    assert eq.coefs[6] == pytest.approx(1.0)


def test_set_sliders_short_curve(eq):
    with pytest.raises(SplineLengthError):
        eq.set_sliders([100.0], [0.0])


def test_set_sliders_follows_curve_without_touching_coefs(eq):
    before = list(eq.coefs)
    x, y = _curve(eq, 0.1)
    eq.set_sliders(x, y)
    for band in range(EQ_BANDS):
        assert eq.slider(band) == pytest.approx(0.1 / 0.05)
    _, gains = eq.freqs_and_gains()
    assert all(g == pytest.approx(db_to_lin(0.1 / 0.05)) for g in gains)
    assert eq.coefs == before


def test_set_sliders_mismatched_lengths(eq):
    x, y = _curve(eq, 0.0)
    with pytest.raises(ValueError):
        eq.set_sliders(x, y[:-1])


def test_set_range_clamps(eq):
    eq.set_band_gain(3, 10.0)
    eq.set_band_gain(4, -10.0)
    eq.set_range(-6.0, 6.0)
    assert eq.slider(3) == 6.0
    assert eq.slider(4) == -6.0
    assert eq.set_band_gain(5, 20.0) == 6.0


def test_set_range_rejects_inverted(eq):
    with pytest.raises(ValueError):
        eq.set_range(5.0, -5.0)


def test_invalid_construction():
    with pytest.raises(ValueError):
        GraphicEQ(0, BINS)
    with pytest.raises(ValueError):
        GraphicEQ(RATE, 7)