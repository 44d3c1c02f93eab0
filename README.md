# firstsound

A small audio toolkit built around a sine-wave oscillator, working on NumPy
arrays.

## What it provides

### `firstsound.sinewave`

- `SineWave(frequency=440.0, amplitude=0.02)`: a multi-channel sine generator.
  - `prepare(rate, num_channels)` sets the sample rate and the number of
    channels. Each channel keeps its own time; channels that already existed
    keep theirs, new ones start at zero. A negative channel count raises
    `ValueError`.
  - `process(buffer)` overwrites a two-dimensional array of shape
    `(channels, samples)` with the sine signal, in place. Each channel's time
    wraps back by one second once it reaches 1.0.
  - `process` raises `RuntimeError` if `prepare` has not been called, and
    `ValueError` if the amplitude lies outside `[0, 1]`, if the buffer is not
    two-dimensional, or if its channel count differs from the one given to
    `prepare`.
- `SineWaveChannel(amplitude=0.2, frequency=440.0)`: a single-channel generator
  whose time runs on without wrapping.
  - `prepare(sample_rate)` sets the sample rate.
  - `process(num_samples)` returns a new `float32` array of that many samples
    and advances the oscillator's time. A negative count raises `ValueError`.

### `firstsound.parameters`

- `NormalisableRange(start, end, interval=0.0, skew=1.0)`: a frozen value range.
  `convert_to_0to1` and `convert_from_0to1` map between real values and the
  normalised 0..1 scale (applying the skew), and `snap_to_legal_value` rounds
  to the interval grid and clamps into the range. An empty or reversed range,
  a negative interval or a non-positive skew raises `ValueError`.
- `FloatParameter(parameter_id, name, range, default)`: a parameter whose
  `value` starts at the snapped default. `set_value` snaps and stores a value
  and returns what was stored; `normalised` gives the value on the 0..1 scale.
- `ParameterState(parameters)`: a collection of parameters keyed by id.
  `get_value` and `set_value` read and write real values; `set_value` calls
  each listener as `listener(parameter_id, new_value)` only when the stored
  value actually changes. `add_listener` and `remove_listener` manage the
  listeners. It supports `state[id]`, `id in state`, iteration and `len`.
  Unknown ids raise `KeyError`; duplicate ids at construction raise
  `ValueError`.

### `firstsound.processor`

- `create_parameter_layout()` returns the processor's single parameter,
  `"frequency"`: 20 Hz to 20 kHz, a 0.1 Hz interval, skew 0.5, default 500 Hz.
- `ChannelSet` (`DISABLED`, `MONO`, `STEREO`) and `BusesLayout(main_input,
  main_output)`, both stereo by default.
- `SineProcessor(layout=None)`: replaces its input with a sine tone.
  - `prepare_to_play(sample_rate, samples_per_block)` prepares the oscillator
    for the output channel count.
  - `process_block(buffer)` clears output channels beyond the input count and
    renders the tone into `buffer` in place.
  - `is_buses_layout_supported(layouts)` accepts mono or stereo output whose
    input matches the output.
  - Changing `parameters` `"frequency"` updates the oscillator's frequency
    through `parameter_changed`.
  - `release_resources()` does nothing, as nothing is held between playbacks.

Note that the oscillator's own starting frequency is 440 Hz; the processor's
500 Hz parameter default reaches it only once the parameter is changed.

## Installation

```
pip install .
```

## Usage

```python
import numpy as np
from firstsound.processor import SineProcessor

processor = SineProcessor()
processor.prepare_to_play(48000.0, 512)

buffer = np.zeros((2, 512), dtype=np.float32)
processor.process_block(buffer)   # buffer now holds a quiet sine wave

processor.parameters.set_value("frequency", 1000.0)
processor.process_block(buffer)
```

The oscillators can be used on their own:

```python
import numpy as np
from firstsound.sinewave import SineWave, SineWaveChannel

wave = SineWave(frequency=220.0)
wave.prepare(44100.0, 1)
block = np.zeros((1, 256), dtype=np.float32)
wave.process(block)

channel = SineWaveChannel()
channel.prepare(44100.0)
samples = channel.process(256)
```

## What it does not do

The package only computes samples into arrays. It does not play sound through
an audio device, does not load as a plug-in in a host application, has no
graphical editor, and does not save or restore parameter state. There is no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```