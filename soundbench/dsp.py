"""Voice band-pass filtering, stereo down-mixing and level metering for 16-bit audio."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from soundbench.wav import SAMPLE_RATE

__all__ = [
    "BiquadFilter",
    "VoiceFilter",
    "mix_to_mono",
    "rms_volume",
]

FULL_SCALE = 32768.0
MAX_SAMPLE = 32767.0

LOW_CENTER_HZ = 500.0
HIGH_CENTER_HZ = 2000.0
DEFAULT_Q = 2.0
OUTPUT_GAIN = 2.0


@dataclass
class BiquadFilter:
    """A second-order IIR section in direct form I with normalised coefficients."""

    b0: float = 1.0
    b1: float = 0.0
    b2: float = 0.0
    a1: float = 0.0
    a2: float = 0.0
    x1: float = field(default=0.0, compare=False)
    x2: float = field(default=0.0, compare=False)
    y1: float = field(default=0.0, compare=False)
    y2: float = field(default=0.0, compare=False)

    @classmethod
    def bandpass(cls, fs: float, f0: float, q: float) -> BiquadFilter:
        """Build a constant-peak band-pass centred on ``f0`` Hz at sample rate ``fs``."""
        if fs <= 0:
            raise ValueError("Sampling frequency must be positive.")
        if q <= 0:
            raise ValueError("Quality factor must be positive.")
        w0 = 2.0 * math.pi * f0 / fs
        alpha = math.sin(w0) / (2.0 * q)
        a0 = 1.0 + alpha
        return cls(
            b0=alpha / a0,
            b1=0.0,
            b2=-alpha / a0,
            a1=-2.0 * math.cos(w0) / a0,
            a2=(1.0 - alpha) / a0,
        )

    def process(self, sample: float) -> float:
        """Filter one sample and return the output, advancing the state."""
        out = (
            self.b0 * sample
            + self.b1 * self.x1
            + self.b2 * self.x2
            - self.a1 * self.y1
            - self.a2 * self.y2
        )
        self.x2, self.x1 = self.x1, sample
        self.y2, self.y1 = self.y1, out
        return out

    def reset(self) -> None:
        """Clear the filter's history without touching its coefficients."""
        self.x1 = self.x2 = self.y1 = self.y2 = 0.0


def mix_to_mono(left: int, right: int) -> int:
    """Average two 16-bit samples, truncating toward zero."""
    total = left + right
    half = abs(total) // 2
    return half if total >= 0 else -half


def rms_volume(samples: Sequence[int]) -> float:
    """Return the RMS level of 16-bit samples normalised to 0.0-1.0 (0.0 when empty)."""
    if not samples:
        return 0.0
    mean = sum(s * s for s in samples) / len(samples)
    return math.sqrt(mean) / FULL_SCALE


def _voice_filters(sample_rate: float) -> tuple[BiquadFilter, BiquadFilter]:
    return (
        BiquadFilter.bandpass(sample_rate, LOW_CENTER_HZ, DEFAULT_Q),
        BiquadFilter.bandpass(sample_rate, HIGH_CENTER_HZ, DEFAULT_Q),
    )


class VoiceFilter:
    """Down-mixes interleaved stereo to mono and optionally passes it through two band-passes.

    The result is written back to both channels. ``volume`` holds the RMS level
    of the mono signal from the most recent call to :meth:`process`.
    """

    def __init__(self, sample_rate: float = SAMPLE_RATE, enabled: bool = True) -> None:
        self.sample_rate = sample_rate
        self._low, self._high = _voice_filters(sample_rate)
        self._enabled = enabled
        self.volume = 0.0

    @property
    def enabled(self) -> bool:
        """Whether filtering is applied; switching it on starts the filters afresh."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        if self._enabled:
            self.reset()

    def reset(self) -> None:
        """Reinitialise both band-pass filters."""
        self._low, self._high = _voice_filters(self.sample_rate)

    def _filter(self, mono: int) -> int:
        sample = mono / FULL_SCALE
        sample = self._low.process(sample)
        sample = self._high.process(sample)
        sample = max(-1.0, min(1.0, sample * OUTPUT_GAIN))
        return int(sample * MAX_SAMPLE)

    def process(self, stereo: Iterable[int]) -> list[int]:
        """Process interleaved left/right samples; return interleaved output."""
        frames = list(stereo)
        if len(frames) % 2:
            raise ValueError("Stereo input must hold an even number of samples.")

        mono_out = []
        for left, right in zip(frames[0::2], frames[1::2]):
            mono = mix_to_mono(left, right)
            if self._enabled:
                mono = self._filter(mono)
            mono_out.append(mono)

        self.volume = rms_volume(mono_out)
        return [s for mono in mono_out for s in (mono, mono)]