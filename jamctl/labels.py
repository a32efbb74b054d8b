"""Text shown by the main window: band labels, readouts, meter layout and spectrum captions."""

from __future__ import annotations

import enum
import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MeterDirection(enum.Enum):
    """Direction in which a level meter grows."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MeterSide(enum.Enum):
    """Side of a meter on which its scale is drawn."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class SpectrumMode(enum.IntEnum):
    """Point in the signal chain the spectrum display shows, in combo box order."""

    PRE_EQ = 0
    POST_EQ = 1
    POST_COMP = 2
    OUTPUT = 3


_SPECTRUM_LABELS = {
    SpectrumMode.PRE_EQ: "Pre EQ spectrum         ",
    SpectrumMode.POST_EQ: "Post EQ spectrum        ",
    SpectrumMode.POST_COMP: "Post compressor spectrum",
    SpectrumMode.OUTPUT: "Output spectrum         ",
}


def _leading_int(text: str) -> tuple[int | None, str]:
    """Read an integer at the start of text, returning it and the rest."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None, text
    return int(match.group(1)), text[match.end():]


def parse_band_label(text: str) -> int:
    """Frequency in Hz written on a band label such as ``"250"`` or ``"1k6"``.

    Labels holding a ``k`` read as thousands and hundreds; anything that
    cannot be read counts as zero.
    """
    if "k" in text:
        thousands, rest = _leading_int(text)
        if thousands is None:
            return 0
        hundreds = 0
        if rest.startswith("k"):
            parsed, _ = _leading_int(rest[1:])
            if parsed is not None:
                hundreds = parsed
        return thousands * 1000 + hundreds * 100
    value, _ = _leading_int(text)
    return 0 if value is None else value


def frequency_markup(text: str) -> str:
    """Bold frequency readout for the band a label names."""
    return f"<b>{parse_band_label(text)} Hz</b>"


def gain_markup(value: float) -> str:
    """Bold gain readout of a slider value in dB."""
    return f"<b>{value:.1f} dB</b>"


def rms_samples(time_slice_ms: float, sample_rate: float) -> int:
    """Number of samples in an RMS time slice, rounded to the nearest integer."""
    samples = (time_slice_ms / 1000.0) * sample_rate
    return int(samples - 0.5) if samples < 0.0 else int(samples + 0.5)


def meter_orientation(spec: str | None) -> tuple[MeterDirection, MeterSide]:
    """Direction and scale side of a meter from its layout string.

    An exact ``"down"``, ``"left"`` or ``"right"`` sets the direction, anything
    else points it up. The scale side is the last of left, right, top and
    bottom found in the string, top when none is.
    """
    direction = MeterDirection.UP
    if spec in ("down", "left", "right"):
        direction = MeterDirection(spec)

    side = MeterSide.TOP
    if spec:
        for candidate in (MeterSide.LEFT, MeterSide.RIGHT, MeterSide.TOP, MeterSide.BOTTOM):
            if candidate.value in spec:
                side = candidate
    return direction, side


def spectrum_label(mode: int) -> str:
    """Caption of the equaliser curve for a spectrum mode."""
    return _SPECTRUM_LABELS[SpectrumMode(mode)]