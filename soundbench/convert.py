"""Conversion between raw 16-bit mono 48 kHz PCM and WAV files."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence, Union

from soundbench.wav import (
    BITS_PER_SAMPLE,
    SAMPLE_RATE,
    WavFormatError,
    create_wav_header,
    read_wav_header,
    write_wav_header,
)

__all__ = ["ConversionError", "pcm_to_wav", "wav_to_pcm", "main"]

PathLike = Union[str, "os.PathLike[str]"]

_BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8


class ConversionError(Exception):
    """Raised when a file cannot be converted."""


def pcm_to_wav(input_path: PathLike, output_path: PathLike) -> int:
    """Wrap a raw PCM file in a mono 16-bit 48 kHz WAV header.

    Returns the number of samples written.
    """
    try:
        with open(input_path, "rb") as fin:
            payload = fin.read()
    except OSError as exc:
        raise ConversionError("Unable to open the input PCM file.") from exc

    if not payload:
        raise ConversionError("Input PCM file is empty or invalid.")
    if len(payload) % _BYTES_PER_SAMPLE:
        raise ConversionError(
            "Invalid PCM file size (must be multiple of 2 for 16-bit audio)."
        )

    try:
        fout = open(output_path, "wb")
    except OSError as exc:
        raise ConversionError("Unable to create the output WAV file.") from exc

    with fout:
        try:
            write_wav_header(fout, create_wav_header(len(payload)))
        except (WavFormatError, OSError) as exc:
            raise ConversionError("Failed to write WAV header.") from exc
        fout.write(payload)

    return len(payload) // _BYTES_PER_SAMPLE


def wav_to_pcm(input_path: PathLike, output_path: PathLike) -> int:
    """Strip the header from a mono 16-bit 48 kHz WAV file, writing raw PCM.

    Returns the number of samples written.
    """
    try:
        fin = open(input_path, "rb")
    except OSError as exc:
        raise ConversionError("Unable to open input WAV file.") from exc

    with fin:
        try:
            header = read_wav_header(fin)
        except WavFormatError as exc:
            raise ConversionError("Failed to read WAV file header.") from exc

        try:
            header.validate()
        except WavFormatError as exc:
            raise ConversionError("Invalid WAV file format.") from exc

        if header.channels != 1:
            raise ConversionError("Only mono (1 channel) files are supported.")
        if header.sample_rate != SAMPLE_RATE:
            raise ConversionError("Only 48kHz sample rate is supported.")
        if header.bits_per_sample != BITS_PER_SAMPLE:
            raise ConversionError("Only 16-bit samples are supported.")

        try:
            fout = open(output_path, "wb")
        except OSError as exc:
            raise ConversionError("Unable to create output PCM file.") from exc

        with fout:
            payload = fin.read(header.data_size)
            if len(payload) != header.data_size:
                raise ConversionError("Failed to read audio data from WAV file.")
            fout.write(payload)

    return len(payload) // _BYTES_PER_SAMPLE


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soundbench-convert",
        description="Convert between raw 16-bit mono 48 kHz PCM and WAV.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    to_wav = commands.add_parser("pcm-to-wav", help="wrap raw PCM in a WAV header")
    to_wav.add_argument("input", help="input PCM file")
    to_wav.add_argument("output", help="output WAV file")
    to_pcm = commands.add_parser("wav-to-pcm", help="extract raw PCM from a WAV file")
    to_pcm.add_argument("input", help="input WAV file")
    to_pcm.add_argument("output", help="output PCM file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter from the command line; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "pcm-to-wav":
        convert, missing = pcm_to_wav, "Please specify both input and output files."
    else:
        convert, missing = wav_to_pcm, "Please specify both input and output file paths."

    if not args.input or not args.output:
        print(missing, file=sys.stderr)
        return 1

    try:
        samples = convert(args.input, args.output)
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Conversion complete!\n{samples} samples converted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())