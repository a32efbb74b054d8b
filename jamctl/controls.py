"""Crossover band solo/bypass routing and the blinking of bypass indicators."""

from __future__ import annotations

import enum

from jamctl.compressor import XO_BANDS

Color = tuple[int, int, int]

BYPASS_RED: Color = (65535, 0, 0)
"""Colour a bypass indicator shows while lit, as 16-bit RGB."""


class BandAction(enum.Enum):
    """What the audio engine does with one crossover band."""

    ACTIVE = "active"
    MUTE = "mute"
    BYPASS = "bypass"


class CrossoverControls:
    """Solo and bypass buttons of the crossover bands and the actions they imply."""

    def __init__(self, bands: int = XO_BANDS) -> None:
        if bands < 1:
            raise ValueError("there must be at least one band")
        self.bands = bands
        self._solo = [False] * bands
        self._bypass = [False] * bands
        self._actions = [BandAction.ACTIVE] * bands

    def _check_band(self, band: int) -> None:
        if not 0 <= band < self.bands:
            raise IndexError(f"band {band} out of range")

    def _own_action(self, band: int) -> BandAction:
        return BandAction.BYPASS if self._bypass[band] else BandAction.ACTIVE

    def set_solo(self, band: int, state: bool) -> list[BandAction]:
        """Press or release a band's solo button; returns every band's action.

        While any band is soloed, bands that are not soloed are muted. Soloed
        bands, and all bands when none is soloed, follow their bypass buttons.
        """
        self._check_band(band)
        self._solo[band] = bool(state)
        any_solo = any(self._solo)
        self._actions = [
            BandAction.MUTE if any_solo and not soloed else self._own_action(b)
            for b, soloed in enumerate(self._solo)
        ]
        return self.actions()

    def set_bypass(self, band: int, state: bool) -> BandAction:
        """Press or release a band's bypass button; returns that band's action.

        A band muted because another band is soloed stays muted; its bypass
        setting takes effect when the solo buttons next change.
        """
        self._check_band(band)
        self._bypass[band] = bool(state)
        if not any(self._solo) or self._solo[band]:
            self._actions[band] = self._own_action(band)
        return self._actions[band]

    def actions(self) -> list[BandAction]:
        """Current action of every band, lowest band first."""
        return list(self._actions)


class BypassBlinker:
    """Colour of a bypass indicator that flashes red while bypass is on."""

    def __init__(self, normal_color: Color) -> None:
        self.normal_color = tuple(normal_color)
        self._lit = False

    def blink(self, start: int) -> Color:
        """Advance the indicator and return the colour it now shows.

        A negative ``start`` restores the normal colour, a positive one lights
        it red, and zero flips between red and the normal colour.
        """
        if start < 0:
            return self.normal_color
        if start:
            self._lit = True
        color = BYPASS_RED if self._lit else self.normal_color
        self._lit = not self._lit
        return color