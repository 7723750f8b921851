"""In-memory capture of 16-bit audio with pause/resume and WAV export."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Iterable, Union

from soundbench.dsp import rms_volume
from soundbench.wav import SAMPLE_RATE, create_wav_header, write_wav_header

__all__ = ["MAX_SAMPLES", "Recorder"]

MAX_SAMPLES = SAMPLE_RATE * 300  # five minutes of mono audio at 48 kHz

PathLike = Union[str, "os.PathLike[str]"]


class Recorder:
    """Collects incoming 16-bit samples while recording and writes them as WAV.

    Samples handed to :meth:`feed` are kept only while recording and not
    paused, and never beyond ``capacity`` samples. ``volume`` holds the RMS
    level (0.0-1.0) of the samples stored by the most recent :meth:`feed`.
    """

    def __init__(
        self,
        capacity: int = MAX_SAMPLES,
        sample_rate: int = SAMPLE_RATE,
        channels: int = 1,
    ) -> None:
        if capacity < 0:
            raise ValueError("Capacity must not be negative.")
        if channels < 1:
            raise ValueError("At least one channel is required.")
        self.capacity = capacity
        self.sample_rate = sample_rate
        self.channels = channels
        self.volume = 0.0
        self._buffer = array("h")
        self._recording = False
        self._paused = False

    @property
    def recording(self) -> bool:
        """Whether a recording session is in progress."""
        return self._recording

    @property
    def paused(self) -> bool:
        """Whether incoming samples are currently being ignored."""
        return self._paused

    @property
    def samples(self) -> list[int]:
        """A copy of the samples captured so far."""
        return self._buffer.tolist()

    def __len__(self) -> int:
        return len(self._buffer)

    def record(self) -> None:
        """Start a new session, discarding earlier audio; no-op if already recording."""
        if not self._recording:
            self._buffer = array("h")
            self._paused = False
            self._recording = True

    def pause(self) -> bool:
        """Toggle between paused and running; return the new paused state."""
        self._paused = not self._paused
        return self._paused

    def stop(self) -> None:
        """End the session, keeping the captured audio for saving."""
        if self._recording:
            self._recording = False
            self._paused = False

    def feed(self, samples: Iterable[int]) -> int:
        """Store incoming samples; return how many were kept."""
        if not self._recording or self._paused:
            return 0
        try:
            incoming = array("h", samples)
        except OverflowError as exc:
            raise ValueError("Samples must be 16-bit signed integers.") from exc

        room = self.capacity - len(self._buffer)
        kept = incoming[:room] if len(incoming) > room else incoming
        self._buffer.extend(kept)
        self.volume = rms_volume(kept)
        return len(kept)

    def save(self, path: PathLike) -> int:
        """Write the captured audio to a WAV file; return the number of samples written."""
        payload = array("h", self._buffer)
        if sys.byteorder == "big":
            payload.byteswap()
        data = payload.tobytes()
        header = create_wav_header(len(data), self.channels, self.sample_rate)
        with open(path, "wb") as fout:
            write_wav_header(fout, header)
            fout.write(data)
        return len(self._buffer)