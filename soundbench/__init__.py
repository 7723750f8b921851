"""Tools for 16-bit PCM audio: WAV headers, PCM/WAV conversion, band-pass filtering and in-memory recording."""

__version__ = "0.1.0"