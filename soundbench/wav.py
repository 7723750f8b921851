"""Canonical 44-byte RIFF/WAVE header for 16-bit PCM audio."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

__all__ = [
    "HEADER_SIZE",
    "SAMPLE_RATE",
    "WavFormatError",
    "WavHeader",
    "create_wav_header",
    "read_wav_header",
    "write_wav_header",
]

SAMPLE_RATE = 48000
BITS_PER_SAMPLE = 16
PCM_FORMAT = 1

_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = _LAYOUT.size  # 44 bytes


class WavFormatError(ValueError):
    """Raised when a WAV header is missing, truncated or malformed."""


@dataclass(frozen=True)
class WavHeader:
    """The fixed-layout header that precedes PCM data in a WAV file."""

    riff: bytes = b"RIFF"
    file_size: int = HEADER_SIZE - 8
    wave: bytes = b"WAVE"
    fmt: bytes = b"fmt "
    fmt_size: int = 16
    format: int = PCM_FORMAT
    channels: int = 1
    sample_rate: int = SAMPLE_RATE
    byte_rate: int = SAMPLE_RATE * 2
    block_align: int = 2
    bits_per_sample: int = BITS_PER_SAMPLE
    data: bytes = b"data"
    data_size: int = 0

    def pack(self) -> bytes:
        """Return the header as its 44 little-endian bytes."""
        try:
            return _LAYOUT.pack(
                self.riff,
                self.file_size,
                self.wave,
                self.fmt,
                self.fmt_size,
                self.format,
                self.channels,
                self.sample_rate,
                self.byte_rate,
                self.block_align,
                self.bits_per_sample,
                self.data,
                self.data_size,
            )
        except struct.error as exc:
            raise WavFormatError(f"Cannot encode WAV header: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> WavHeader:
        """Decode a header from the first 44 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise WavFormatError("Failed to read the WAV file header.")
        return cls(*_LAYOUT.unpack_from(data))

    def validate(self) -> None:
        """Check the chunk tags; raise WavFormatError if any is wrong."""
        if (
            self.riff != b"RIFF"
            or self.wave != b"WAVE"
            or self.fmt != b"fmt "
            or self.data != b"data"
        ):
            raise WavFormatError("Invalid input WAV file.")


def create_wav_header(
    data_size: int, channels: int = 1, sample_rate: int = SAMPLE_RATE
) -> WavHeader:
    """Build a 16-bit PCM header describing ``data_size`` bytes of audio."""
    if data_size < 0:
        raise WavFormatError("Data size must not be negative.")
    block_align = channels * BITS_PER_SAMPLE // 8
    return WavHeader(
        file_size=data_size + HEADER_SIZE - 8,
        channels=channels,
        sample_rate=sample_rate,
        byte_rate=sample_rate * block_align,
        block_align=block_align,
        data_size=data_size,
    )


def read_wav_header(stream: BinaryIO) -> WavHeader:
    """Read a header from a binary stream positioned at its start."""
    return WavHeader.from_bytes(stream.read(HEADER_SIZE))


def write_wav_header(stream: BinaryIO, header: WavHeader) -> None:
    """Write ``header`` to a binary stream."""
    payload = header.pack()
    written = stream.write(payload)
    if written is not None and written != len(payload):
        raise WavFormatError("Failed to write the WAV file header.")