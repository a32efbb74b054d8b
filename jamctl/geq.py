"""Thirty-band graphic equaliser: band sliders mapped onto FFT bin coefficients."""

from __future__ import annotations

import math
from collections.abc import Sequence

EQ_BANDS = 30
"""Number of third-octave bands in the graphic equaliser."""

_SPLINE_DB_SCALE = 0.05
"""Factor between log10 linear gain and decibels (1 / 20)."""


class SplineLengthError(ValueError):
    """Raised when a splined curve is too short to cover every FFT bin."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(
            f"Splined length {length} does not match BINS / 2 - 1 ({expected})"
        )
        self.length = length
        self.expected = expected


def db_to_lin(db: float) -> float:
    """Convert a gain in decibels to a linear factor."""
    return 10.0 ** (db / 20.0)


def band_frequencies(count: int = EQ_BANDS) -> list[float]:
    """Centre frequencies of the third-octave bands, band 16 being 1 kHz."""
    return [1000.0 * 10.0 ** ((i - 16) * 0.1) for i in range(count)]


def _nint(value: float) -> int:
    return int(value - 0.5) if value < 0.0 else int(value + 0.5)


class GraphicEQ:
    """Slider state of the graphic equaliser and the FFT coefficients it drives."""

    def __init__(self, sample_rate: float, bins: int) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if bins < 4 or bins % 2:
            raise ValueError("bin count must be an even number of at least 4")
        self.sample_rate = float(sample_rate)
        self.bins = bins
        self.frequencies = band_frequencies(EQ_BANDS)
        self._sliders = [0.0] * EQ_BANDS
        self._gains = [1.0] * (EQ_BANDS + 1)
        self._range = (-math.inf, math.inf)
        self._drawn = False
        self.coefs = [1.0] * (bins // 2)
        self._bin_base, self._bin_delta = self._map_bins()
        self._update_coefs()

    @property
    def half(self) -> int:
        """Number of usable FFT bins, BINS / 2."""
        return self.bins // 2

    @property
    def spline_length(self) -> int:
        """Length a splined curve must have: BINS / 2 - 1."""
        return self.half - 1

    @property
    def bin_base(self) -> list[int]:
        """Band each FFT bin interpolates from."""
        return list(self._bin_base)

    @property
    def bin_delta(self) -> list[float]:
        """Interpolation fraction towards the next band for each FFT bin."""
        return list(self._bin_delta)

    def _map_bins(self) -> tuple[list[int], list[float]]:
        half = self.half
        hz_per_bin = self.sample_rate / self.bins
        freqs = self.frequencies
        base = [0] * half
        delta = [0.0] * half

        b = 0
        while b <= freqs[0] / hz_per_bin and b < half - 1:
            base[b] = 0
            delta[b] = 0.0
            b += 1

        i = 1
        while (
            i < EQ_BANDS - 1
            and b < half - 1
            and freqs[i + 1] < self.sample_rate / 2
        ):
            last_bin = b
            next_bin = freqs[i + 1] / hz_per_bin
            while b <= next_bin:
                base[b] = i
                delta[b] = (b - last_bin) / (next_bin - last_bin)
                b += 1
            i += 1

        for rest in range(b, half):
            base[rest] = EQ_BANDS - 1
            delta[rest] = 0.0
        return base, delta

    def _update_coefs(self) -> None:
        if self._drawn:
            return
        self.coefs[0] = 1.0
        for b in range(1, self.half - 1):
            base = self._bin_base[b]
            d = self._bin_delta[b]
            self.coefs[b] = (1.0 - d) * self._gains[base] + d * self._gains[base + 1]

    def _check_band(self, band: int) -> None:
        if not 0 <= band < EQ_BANDS:
            raise IndexError(f"adjustment from out-of-range band {band} requested")

    def _clamp(self, value: float) -> float:
        low, high = self._range
        return min(max(value, low), high)

    def set_band_gain(self, band: int, db: float) -> float:
        """Move one slider to a gain in dB; returns the value it settled on."""
        self._check_band(band)
        value = self._clamp(db)
        self._sliders[band] = value
        self._gains[band] = db_to_lin(value)
        self._update_coefs()
        return value

    def slider(self, band: int) -> float:
        """Current dB value of a band's slider."""
        self._check_band(band)
        return self._sliders[band]

    def set_coefs(self, x: Sequence[float], y: Sequence[float]) -> None:
        """Set bin coefficients from a splined curve of log10 gains."""
        length = min(len(x), len(y))
        expected = self.spline_length
        if length < expected:
            raise SplineLengthError(length, expected)
        for freq, log_gain in zip(x[:expected], y[:expected]):
            b = _nint(freq / self.sample_rate * (self.bins + 0.5))
            if not 0 <= b < len(self.coefs):
                raise IndexError(f"frequency {freq} falls outside the FFT bins")
            self.coefs[b] = 10.0 ** log_gain

    def set_sliders(self, x: Sequence[float], y: Sequence[float]) -> None:
        """Move the sliders to follow a splined curve of log10 gains.

        The bin coefficients are left as they are: the curve already set them.
        """
        if len(x) != len(y):
            raise ValueError("frequency and gain sequences differ in length")
        length = len(x)
        expected = self.spline_length
        if length < expected:
            raise SplineLengthError(length, expected)

        self._drawn = True
        try:
            self.set_band_gain(0, y[0] / _SPLINE_DB_SCALE)
            i = 0
            for band in range(1, EQ_BANDS - 1):
                freq = self.frequencies[band]
                while freq > x[i]:
                    i += 1
                    if i >= length:
                        raise ValueError(
                            f"curve ends before band frequency {freq:g} Hz"
                        )
                if i == 0:
                    value = y[0]
                else:
                    value = y[i - 1] + (y[i] - y[i - 1]) * (
                        (freq - x[i - 1]) / (x[i] - x[i - 1])
                    )
                self.set_band_gain(band, value / _SPLINE_DB_SCALE)
            self.set_band_gain(EQ_BANDS - 1, y[length - 1] / _SPLINE_DB_SCALE)
        finally:
            self._drawn = False

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the dB range of every slider, clamping the current values."""
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum")
        self._range = (float(minimum), float(maximum))
        for band, value in enumerate(self._sliders):
            clamped = self._clamp(value)
            if clamped != value:
                self.set_band_gain(band, clamped)

    def freqs_and_gains(self) -> tuple[list[float], list[float]]:
        """Band frequencies and their linear gains."""
        return list(self.frequencies), self._gains[:EQ_BANDS]