"""Audio processor that outputs a sine tone controlled by a frequency parameter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .parameters import FloatParameter, NormalisableRange, ParameterState
from .sinewave import SineWave

PLUGIN_NAME = "JuceFirstSound"


class ChannelSet(Enum):
    """Channel layouts a bus can have."""

    DISABLED = 0
    MONO = 1
    STEREO = 2

    @property
    def num_channels(self) -> int:
        return self.value


@dataclass(frozen=True)
class BusesLayout:
    """Main input and output channel layouts."""

    main_input: ChannelSet = ChannelSet.STEREO
    main_output: ChannelSet = ChannelSet.STEREO


def create_parameter_layout() -> list[FloatParameter]:
    """The processor's parameters: a skewed frequency control."""
    frequency_range = NormalisableRange(20.0, 20000.0, 0.1, 0.5)
    return [FloatParameter("frequency", "Frequency", frequency_range, 500.0)]


class SineProcessor:
    """Effect processor that replaces its input with a sine tone."""

    name = PLUGIN_NAME
    accepts_midi = False
    produces_midi = False
    is_midi_effect = False
    tail_length_seconds = 0.0
    num_programs = 1
    current_program = 0

    def __init__(self, layout: BusesLayout | None = None) -> None:
        self.layout = layout or BusesLayout()
        self.parameters = ParameterState(create_parameter_layout())
        self.sine_wave = SineWave()
        self.parameters.add_listener("frequency", self.parameter_changed)

    @property
    def total_num_input_channels(self) -> int:
        return self.layout.main_input.num_channels

    @property
    def total_num_output_channels(self) -> int:
        return self.layout.main_output.num_channels

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        """Prepare the oscillator for the output channel count."""
        self.sine_wave.prepare(sample_rate, self.total_num_output_channels)

    def release_resources(self) -> None:
        """Nothing is held between playbacks."""

    def is_buses_layout_supported(self, layouts: BusesLayout) -> bool:
        """Mono or stereo output, with input matching output."""
        if layouts.main_output not in (ChannelSet.MONO, ChannelSet.STEREO):
            return False
        return layouts.main_output == layouts.main_input

    def process_block(self, buffer: np.ndarray) -> None:
        """Render the sine tone into ``buffer`` (channels x samples) in place."""
        buffer[self.total_num_input_channels : self.total_num_output_channels, :] = 0.0
        self.sine_wave.process(buffer)

    def parameter_changed(self, parameter_id: str, new_value: float) -> None:
        if parameter_id == "frequency":
            self.sine_wave.frequency = new_value