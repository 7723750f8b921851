import io
import wave

import pytest

from soundbench.wav import (
    HEADER_SIZE,
    WavFormatError,
    WavHeader,
    create_wav_header,
    read_wav_header,
    write_wav_header,
)


def _wav_bytes(samples: bytes, channels: int = 1, sample_rate: int = 48000) -> bytes:
    buf = io.BytesIO()
    write_wav_header(buf, create_wav_header(len(samples), channels, sample_rate))
    buf.write(samples)
    return buf.getvalue()


def test_header_is_44_bytes():
    assert len(create_wav_header(0).pack()) == 44
    assert HEADER_SIZE == 44


def test_chunk_tags_at_fixed_offsets():
    raw = create_wav_header(10).pack()
    assert raw[0:4] == b"RIFF"
    assert raw[8:16] == b"WAVEfmt "
    assert raw[36:40] == b"data"


def test_defaults_are_mono_16bit_48k():
    header = create_wav_header(100)
    assert header.channels == 1
    assert header.sample_rate == 48000
    assert header.bits_per_sample == 16
    assert header.format == 1
    assert header.fmt_size == 16
    assert header.byte_rate == 96000
    assert header.data_size == 100


def test_file_size_counts_rest_of_file():
    samples = bytes(range(200))
    raw = _wav_bytes(samples)
    header = WavHeader.from_bytes(raw)
    assert header.file_size == len(raw) - 8


def test_readable_by_stdlib_wave():
    samples = b"\x01\x00\xff\x7f\x00\x80\x10\x20"
    with wave.open(io.BytesIO(_wav_bytes(samples)), "rb") as w:
        assert w.getnchannels() == 1
        assert w.getsampwidth() == 2
        assert w.getframerate() == 48000
        assert w.getnframes() == len(samples) // 2
        assert w.readframes(w.getnframes()) == samples


def test_stereo_parameters_readable_by_stdlib_wave():
    samples = bytes(16)
    with wave.open(io.BytesIO(_wav_bytes(samples, 2, 44100)), "rb") as w:
        assert w.getnchannels() == 2
        assert w.getframerate() == 44100
        assert w.getnframes() == len(samples) // 4


def test_stdlib_written_file_parses():
    buf = io.BytesIO()
    with wave.open(buf, "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(48000)
        w.writeframes(bytes(960))
    buf.seek(0)
    header = read_wav_header(buf)
    header.validate()
    assert header == create_wav_header(960)


def test_pack_round_trip():
    header = create_wav_header(4800, 2, 22050)
    assert WavHeader.from_bytes(header.pack()) == header


def test_stream_round_trip_leaves_data_position():
    raw = _wav_bytes(b"abcd")
    stream = io.BytesIO(raw)
    header = read_wav_header(stream)
    assert header.data_size == 4
    assert stream.read() == b"abcd"


def test_truncated_header_rejected():
    raw = create_wav_header(8).pack()
    with pytest.raises(WavFormatError):
        WavHeader.from_bytes(raw[:-1])
    with pytest.raises(WavFormatError):
        read_wav_header(io.BytesIO(b""))


@pytest.mark.parametrize("field", ["riff", "wave", "fmt", "data"])
def test_validate_rejects_bad_tags(field):
    good = create_wav_header(8)
    bad = WavHeader(**{**good.__dict__, field: b"XXXX"})
    with pytest.raises(WavFormatError):
        bad.validate()


def test_validate_accepts_created_header():
    header = create_wav_header(8)
    assert header.validate() is None
    assert header.riff == b"RIFF"


def test_negative_data_size_rejected():
    with pytest.raises(WavFormatError):
        create_wav_header(-2)


def test_unencodable_header_rejected():
    with pytest.raises(WavFormatError):
        WavHeader(channels=70000).pack()