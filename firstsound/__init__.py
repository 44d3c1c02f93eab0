"""Sine oscillators, ranged parameters with listeners, and a sine-tone processor."""

__version__ = "0.0.1"
__all__ = ["sinewave", "parameters", "processor"]