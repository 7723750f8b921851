# soundbench

A small, dependency-free toolkit for 16-bit signed little-endian PCM audio,
mono at 48 kHz by default.

## Modules

- **`soundbench.wav`** – the canonical 44-byte WAV header.
  `WavHeader` is a frozen dataclass with `pack()`, `WavHeader.from_bytes(data)`
  and `validate()` (which checks the `RIFF`, `WAVE`, `fmt ` and `data` tags).
  `create_wav_header(data_size, channels=1, sample_rate=48000)` builds a header
  for 16-bit PCM; `read_wav_header(stream)` and `write_wav_header(stream, header)`
  work on binary streams. Truncated, malformed or unencodable headers and a
  negative data size raise `WavFormatError` (a `ValueError`).
- **`soundbench.convert`** – `pcm_to_wav(input_path, output_path)` wraps a raw
  PCM file in a mono 16-bit 48 kHz header; `wav_to_pcm(input_path, output_path)`
  strips the header from such a WAV file. Both return the number of samples
  written. An unreadable or empty input, an odd byte count, a bad header, a WAV
  that is not mono 16-bit 48 kHz, or short audio data raise `ConversionError`.
- **`soundbench.dsp`** – `BiquadFilter.bandpass(fs, f0, q)` builds a band-pass
  biquad with `process(sample)` and `reset()`. `VoiceFilter` takes interleaved
  stereo samples, averages each pair to mono, optionally runs the result through
  band-passes at 500 Hz and 2 kHz (Q = 2, gain 2, clipped), and returns
  interleaved stereo; its `volume` holds the RMS level of the last call and
  setting `enabled` to true restarts the filters. `mix_to_mono(left, right)`
  and `rms_volume(samples)` are available on their own.
- **`soundbench.recorder`** – `Recorder` keeps samples passed to `feed()` while
  a session started with `record()` is running and not paused (`pause()`
  toggles), up to `capacity` samples (five minutes at 48 kHz by default).
  `stop()` ends the session and `save(path)` writes the take as a WAV file.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
soundbench-convert pcm-to-wav take.pcm take.wav
soundbench-convert wav-to-pcm take.wav take.pcm
```

On success the number of converted samples is printed and the exit status is 0;
on failure the reason is printed to standard error and the exit status is 1.
`soundbench-convert --help` lists the subcommands.

## Library use

```python
from soundbench.convert import pcm_to_wav, wav_to_pcm

samples = pcm_to_wav("take.pcm", "take.wav")
wav_to_pcm("take.wav", "roundtrip.pcm")
```

```python
from soundbench.recorder import Recorder

rec = Recorder()
rec.record()
rec.feed([0, 1200, -1200, 0])
rec.stop()
rec.save("take.wav")
```

```python
from soundbench.dsp import BiquadFilter, VoiceFilter, rms_volume

bp = BiquadFilter.bandpass(48000.0, 1000.0, 2.0)
filtered = [bp.process(s) for s in (0.0, 0.5, -0.5, 0.25)]

voice = VoiceFilter()
stereo_out = voice.process([1000, 800, -1000, -800])
level = voice.volume
```

## What it does not do

soundbench does not talk to sound hardware: it neither captures from a
microphone nor plays to speakers. `Recorder` and `VoiceFilter` work only on
samples you hand to them. There is no graphical interface and no neural noise
suppression; only the band-pass voice filter is provided.