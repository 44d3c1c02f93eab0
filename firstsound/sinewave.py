"""Sine oscillators that render into sample buffers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

TWO_PI = 2.0 * math.pi


@dataclass
class SineWave:
    """Multi-channel sine oscillator that keeps its own time for each channel.

    Each channel's time wraps back by one second once it reaches 1.0.
    """

    frequency: float = 440.0
    amplitude: float = 0.02
    sample_rate: float = field(default=0.0, init=False)
    time_increment: float = field(default=0.0, init=False)
    current_time: list[float] = field(default_factory=list, init=False)

    def prepare(self, rate: float, num_channels: int) -> None:
        """Set the sample rate and the number of channels to render."""
        if num_channels < 0:
            raise ValueError("number of channels must not be negative")
        self.sample_rate = float(np.float32(rate))
        self.time_increment = float(np.float32(1.0) / np.float32(self.sample_rate))
        # Existing channels keep their time; new channels start at zero.
        missing = num_channels - len(self.current_time)
        if missing > 0:
            self.current_time.extend([0.0] * missing)
        else:
            del self.current_time[num_channels:]

    def process(self, buffer: np.ndarray) -> None:
        """Overwrite ``buffer`` (shape: channels x samples) with the sine signal."""
        if self.sample_rate <= 0.0 or self.time_increment <= 0.0:
            raise RuntimeError("prepare() must be called before process()")
        if not 0.0 <= self.amplitude <= 1.0:
            raise ValueError(f"amplitude {self.amplitude} is outside [0, 1]")
        if buffer.ndim != 2:
            raise ValueError("buffer must be two-dimensional (channels x samples)")
        num_channels, num_samples = buffer.shape
        if num_channels != len(self.current_time):
            raise ValueError(
                f"buffer has {num_channels} channels, oscillator was prepared "
                f"for {len(self.current_time)}"
            )

        steps = np.arange(num_samples, dtype=np.float64) * self.time_increment
        for channel, start in enumerate(self.current_time):
            times = np.mod(start + steps, 1.0)
            buffer[channel, :] = self.amplitude * np.sin(TWO_PI * self.frequency * times)
            self.current_time[channel] = math.fmod(
                start + num_samples * self.time_increment, 1.0
            )


@dataclass
class SineWaveChannel:
    """Single-channel sine oscillator whose time runs on without wrapping."""

    amplitude: float = 0.2
    frequency: float = 440.0
    current_sample_rate: float = field(default=0.0, init=False)
    time_increment: float = field(default=0.0, init=False)
    current_time: float = field(default=0.0, init=False)

    def prepare(self, sample_rate: float) -> None:
        """Set the sample rate used to advance time."""
        self.current_sample_rate = float(np.float32(sample_rate))
        self.time_increment = float(
            np.float32(1.0) / np.float32(self.current_sample_rate)
        )

    def process(self, num_samples: int) -> np.ndarray:
        """Render ``num_samples`` samples and return them as a float32 array."""
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")
        times = self.current_time + np.arange(num_samples, dtype=np.float64) * self.time_increment
        self.current_time += num_samples * self.time_increment
        return (self.amplitude * np.sin(TWO_PI * self.frequency * times)).astype(np.float32)