# jamctl

This package holds the control state for a multiband audio mastering console.
It does not depend on any GUI toolkit. It tracks what the console's sliders,
buttons and labels hold. It also works out the values that the audio engine
would be given.

## Modules

### `jamctl.geq`: graphic equaliser

- `GraphicEQ(sample_rate, bins)` models 30 third-octave band sliders. The
  sliders are in dB, and band 16 sits at 1 kHz. The equaliser keeps
  `coefs`, a list of linear gain coefficients with one entry for each of the
  `bins // 2` FFT bins. Each coefficient is interpolated between the two
  bands around it.
- `set_band_gain(band, db)` sets one slider. `slider(band)` reads it back.
- `set_range(minimum, maximum)` limits every slider to a range and clamps
  the current values into it.
- `set_coefs(x, y)` writes coefficients straight from a splined curve. The
  curve gives frequencies `x` and log10 gains `y`.
- `set_sliders(x, y)` moves the sliders to follow such a curve, without
  touching the coefficients.
- Both curve methods raise `SplineLengthError` when the curve has fewer than
  `bins // 2 - 1` points.
- `freqs_and_gains()` returns the band frequencies and their linear gains.
- `db_to_lin(db)` converts a gain in dB to a linear factor.
- `band_frequencies(count)` gives the band centre frequencies.

### `jamctl.compressor`: per-band compressors

- `CompressorBank(bands=3, ranges=None)` holds the slider values of each
  band's compressor. There are six controls, one for each member of
  `Parameter`: `ATTACK`, `RELEASE`, `THRESHOLD`, `RATIO`, `KNEE` and `MAKEUP`.
- `ranges` may map a `Parameter` to a `(low, high)` pair. Values set on that
  control are clamped to that range.
- `set_value(band, parameter, value)` moves a slider.
- `value(band, parameter)` reads a slider.
- `toggle_gang(band, parameter)` and `is_ganged(band, parameter)` control
  ganging. When a ganged control moves, the same control in the other ganged
  bands moves by the same amount. A band does not move if the move would
  take it out of range.
- `suspend_ganging()` and `resume_ganging()` turn ganging off and back on.
- `set_auto(band, state)` turns automatic makeup gain on or off.
  - While it is on, the makeup slider follows threshold and ratio.
  - The value sent to the engine is `auto_makeup_gain(threshold, ratio)`,
    which is `(threshold / ratio - threshold) * 0.4`.
  - Setting `MAKEUP` by hand raises `ValueError`.
- `settings(band)` returns a copy of the `CompressorSettings` the engine
  would see. The knee setting is stored as ten times its slider value.
- `makeup_label(band)` formats the makeup slider the way the auto button
  shows it, for example `"06.0"`.

### `jamctl.controls`: crossover solo and bypass

- `CrossoverControls(bands=3)` tracks the solo and bypass buttons of each
  crossover band. It turns them into a `BandAction` for each band: `ACTIVE`,
  `MUTE` or `BYPASS`.
  - While any band is soloed, bands that are not soloed are muted.
  - A muted band keeps its action when its bypass button changes. The new
    bypass setting takes effect at the next solo change.
- `BypassBlinker(normal_color)` gives the colour of a flashing bypass
  indicator. Colours are 16-bit RGB tuples. `blink(start)` works as follows:
  - a negative `start` restores the normal colour;
  - a positive `start` lights the indicator red;
  - zero toggles between red and the normal colour.

### `jamctl.labels`: text helpers

- `parse_band_label(text)` reads the frequency in Hz from a band label. It
  turns `"250"` into 250 and `"1k6"` into 1600. Text that cannot be read
  gives 0.
- `frequency_markup(text)` and `gain_markup(value)` build the bold readouts,
  for example `"<b>1600 Hz</b>"` and `"<b>-3.5 dB</b>"`.
- `rms_samples(time_slice_ms, sample_rate)` gives the number of samples in
  an RMS window, rounded to the nearest integer.
- `meter_orientation(spec)` reads a meter's layout string. It returns a
  `MeterDirection` and the `MeterSide` its scale is drawn on.
- `spectrum_label(mode)` gives the caption for a `SpectrumMode`.

### `jamctl.context`: context help and scene names

- `HelpContext` records the `HelpTopic` of the area the pointer last
  entered. `enter(topic, force=True)` also flags a forced help request.
  `take_forced()` consumes that request and returns its topic, or `None`.
- `SceneNamer(names)` holds the state of the scene renaming dialog:
  - `select(index)` picks the scene to rename;
  - `edit(text)` records the entered text, up to 99 characters;
  - `confirm()` applies the name;
  - `title()` gives the dialog title.

## Example

```python
from jamctl.geq import GraphicEQ
from jamctl.compressor import CompressorBank, Parameter

eq = GraphicEQ(sample_rate=48000, bins=2048)
eq.set_band_gain(16, 6.0)          # +6 dB at 1 kHz

comps = CompressorBank()
comps.toggle_gang(0, Parameter.THRESHOLD)
comps.toggle_gang(1, Parameter.THRESHOLD)
comps.set_value(0, Parameter.THRESHOLD, -12.0)
assert comps.value(1, Parameter.THRESHOLD) == -12.0   # band 1 followed
```

## What it does not do

This package is a library of control state only. It leaves out the
following:

- It has no window or other screen.
- It processes no audio and does not connect to an audio server.
- It does not map keyboard shortcuts to console actions.
- It does not load or save sessions or scenes.
- It provides no command to run.

An application that embeds it has to supply these parts itself.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```