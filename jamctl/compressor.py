"""Control state of the per-band compressors: sliders, ganging and auto makeup gain."""

from __future__ import annotations

import dataclasses
import enum
import math
from collections.abc import Mapping
from dataclasses import dataclass

XO_BANDS = 3
"""Number of crossover bands, each with its own compressor."""

MAKEUP_CORRECTION = 0.4
"""Damping applied to the automatic makeup gain so it does not over-correct."""


class Parameter(enum.Enum):
    """A compressor control, named after the settings field it drives."""

    ATTACK = "attack"
    RELEASE = "release"
    THRESHOLD = "threshold"
    RATIO = "ratio"
    KNEE = "knee"
    MAKEUP = "makeup_gain"

    @property
    def scale(self) -> float:
        """Factor between the slider value and the stored setting."""
        return 10.0 if self is Parameter.KNEE else 1.0


@dataclass
class CompressorSettings:
    """Settings of one band's compressor as the audio engine sees them."""

    attack: float = 0.0
    release: float = 0.0
    threshold: float = 0.0
    ratio: float = 1.0
    knee: float = 0.0
    makeup_gain: float = 0.0


_INITIAL = {
    Parameter.ATTACK: 0.0,
    Parameter.RELEASE: 0.0,
    Parameter.THRESHOLD: 0.0,
    Parameter.RATIO: 1.0,
    Parameter.KNEE: 0.0,
    Parameter.MAKEUP: 0.0,
}


def auto_makeup_gain(threshold: float, ratio: float) -> float:
    """Damped makeup gain that restores the level lost at the threshold."""
    if ratio == 0:
        raise ValueError("ratio must not be zero")
    return (threshold / ratio - threshold) * MAKEUP_CORRECTION


class CompressorBank:
    """Slider values of every band's compressor, with ganging across bands."""

    def __init__(
        self,
        bands: int = XO_BANDS,
        ranges: Mapping[Parameter, tuple[float, float]] | None = None,
    ) -> None:
        if bands < 1:
            raise ValueError("there must be at least one band")
        self.bands = bands
        self._ranges: dict[Parameter, tuple[float, float]] = {}
        for parameter in Parameter:
            low, high = (ranges or {}).get(parameter, (-math.inf, math.inf))
            if low > high:
                raise ValueError(f"empty range for {parameter.value}")
            self._ranges[parameter] = (float(low), float(high))

        self._sliders = [
            {p: self._clamp(p, _INITIAL[p]) for p in Parameter} for _ in range(bands)
        ]
        self._previous = [dict(s) for s in self._sliders]
        self._ganged = [{p: False for p in Parameter} for _ in range(bands)]
        self._auto = [False] * bands
        self._suspended = False
        self._settings = [CompressorSettings() for _ in range(bands)]
        for band in range(bands):
            for parameter in Parameter:
                self._store(band, parameter, self._sliders[band][parameter])

    def _check_band(self, band: int) -> None:
        if not 0 <= band < self.bands:
            raise IndexError(f"band {band} out of range")

    def _clamp(self, parameter: Parameter, value: float) -> float:
        low, high = self._ranges[parameter]
        return min(max(float(value), low), high)

    def _in_range(self, parameter: Parameter, value: float) -> bool:
        low, high = self._ranges[parameter]
        return low <= value <= high

    def _store(self, band: int, parameter: Parameter, value: float) -> None:
        setattr(self._settings[band], parameter.value, value * parameter.scale)

    def _apply_auto(self, band: int) -> None:
        sliders = self._sliders[band]
        threshold = sliders[Parameter.THRESHOLD]
        ratio = sliders[Parameter.RATIO]
        self._settings[band].makeup_gain = auto_makeup_gain(threshold, ratio)
        shown = self._clamp(Parameter.MAKEUP, threshold / ratio - threshold)
        sliders[Parameter.MAKEUP] = shown
        self._previous[band][Parameter.MAKEUP] = shown

    def _after_change(self, band: int, parameter: Parameter) -> None:
        if parameter in (Parameter.THRESHOLD, Parameter.RATIO) and self._auto[band]:
            self._apply_auto(band)

    def set_value(self, band: int, parameter: Parameter, value: float) -> float:
        """Move a slider; ganged sliders in other bands follow by the same amount.

        Returns the value the slider settled on after clamping to its range.
        """
        self._check_band(band)
        parameter = Parameter(parameter)
        if parameter is Parameter.MAKEUP and self._auto[band]:
            raise ValueError(f"makeup gain of band {band} is set automatically")
        value = self._clamp(parameter, value)
        self._sliders[band][parameter] = value

        if not self._suspended and self._ganged[band][parameter]:
            diff = value - self._previous[band][parameter]
            for other in range(self.bands):
                if other == band or not self._ganged[other][parameter]:
                    continue
                moved = self._sliders[other][parameter] + diff
                if self._in_range(parameter, moved):
                    self._sliders[other][parameter] = moved
                    self._store(other, parameter, moved)
                    self._previous[other][parameter] = moved
                self._after_change(other, parameter)

        self._previous[band][parameter] = value
        self._store(band, parameter, value)
        self._after_change(band, parameter)
        return value

    def value(self, band: int, parameter: Parameter) -> float:
        """Current slider value of a band's control."""
        self._check_band(band)
        return self._sliders[band][Parameter(parameter)]

    def toggle_gang(self, band: int, parameter: Parameter) -> bool:
        """Flip whether a band's control is ganged; returns the new state."""
        self._check_band(band)
        parameter = Parameter(parameter)
        if self._ganged[band][parameter]:
            self._ganged[band][parameter] = False
            self._previous[band][parameter] = self._sliders[band][parameter]
        else:
            self._ganged[band][parameter] = True
        return self._ganged[band][parameter]

    def is_ganged(self, band: int, parameter: Parameter) -> bool:
        """Whether a band's control moves with the other ganged bands."""
        self._check_band(band)
        return self._ganged[band][Parameter(parameter)]

    def set_auto(self, band: int, state: bool) -> None:
        """Turn automatic makeup gain on or off for a band."""
        self._check_band(band)
        self._auto[band] = bool(state)
        if state:
            self._apply_auto(band)

    def suspend_ganging(self) -> None:
        """Stop ganged controls from following each other, e.g. while loading a scene."""
        self._suspended = True

    def resume_ganging(self) -> None:
        """Let ganged controls follow each other again."""
        self._suspended = False

    def settings(self, band: int) -> CompressorSettings:
        """A copy of a band's compressor settings."""
        self._check_band(band)
        return dataclasses.replace(self._settings[band])

    def makeup_label(self, band: int) -> str:
        """Text shown on a band's auto button: the makeup gain slider value."""
        self._check_band(band)
        return f"{self._sliders[band][Parameter.MAKEUP]:04.1f}"