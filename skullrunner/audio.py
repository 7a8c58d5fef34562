"""RIFF/WAVE loading and a library of sounds waiting to be played."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

_CHUNK = struct.Struct("<4si")
_RIFF = struct.Struct("<4si4s")
_FORMAT = struct.Struct("<HHIIHHH")


class WaveFormatError(ValueError):
    """Raised when data is not a WAVE file this loader understands."""


@dataclass(frozen=True)
class WaveFormat:
    """The fields of a WAVE ``fmt `` chunk."""

    format_tag: int
    channels: int
    samples_per_sec: int
    avg_bytes_per_sec: int
    block_align: int
    bits_per_sample: int
    extra_size: int = 0


@dataclass(frozen=True)
class SoundData:
    """A decoded WAVE file: its format and raw sample bytes."""

    format: WaveFormat
    buffer: bytes


def _read(data: bytes, offset: int, size: int) -> bytes:
    chunk = data[offset:offset + size]
    if len(chunk) != size:
        raise WaveFormatError("unexpected end of data")
    return chunk


def _chunk(data: bytes, offset: int) -> tuple[bytes, int]:
    chunk_id, size = _CHUNK.unpack(_read(data, offset, _CHUNK.size))
    if size < 0:
        raise WaveFormatError("negative chunk size")
    return chunk_id, size


def parse_wave(data: bytes) -> SoundData:
    """Decode RIFF/WAVE bytes: a ``fmt `` chunk, an optional ``JUNK`` chunk, then ``data``."""
    riff_id, _, riff_type = _RIFF.unpack(_read(data, 0, _RIFF.size))
    if riff_id != b"RIFF":
        raise WaveFormatError("missing RIFF header")
    if riff_type != b"WAVE":
        raise WaveFormatError("not a WAVE file")
    offset = _RIFF.size

    fmt_id, fmt_size = _chunk(data, offset)
    if fmt_id != b"fmt ":
        raise WaveFormatError("missing fmt chunk")
    if fmt_size > _FORMAT.size:
        raise WaveFormatError("fmt chunk too large")
    offset += _CHUNK.size
    raw_format = _read(data, offset, fmt_size).ljust(_FORMAT.size, b"\0")
    wave_format = WaveFormat(*_FORMAT.unpack(raw_format))
    offset += fmt_size

    chunk_id, size = _chunk(data, offset)
    offset += _CHUNK.size
    if chunk_id == b"JUNK":
        offset += size
        chunk_id, size = _chunk(data, offset)
        offset += _CHUNK.size
    if chunk_id != b"data":
        raise WaveFormatError("missing data chunk")
    return SoundData(wave_format, _read(data, offset, size))


def load_wave(path: Union[str, Path]) -> SoundData:
    """Read and decode a WAVE file."""
    return parse_wave(Path(path).read_bytes())


class SoundLibrary:
    """Loaded sounds, each with a flag asking for it to be played."""

    def __init__(self) -> None:
        self._sounds: list[SoundData] = []
        self._pending: list[bool] = []

    def __len__(self) -> int:
        return len(self._sounds)

    def __getitem__(self, handle: int) -> SoundData:
        return self._sounds[handle]

    def _check(self, handle: int) -> None:
        if not -len(self._sounds) <= handle < len(self._sounds):
            raise IndexError(f"no sound with handle {handle}")

    def load(self, path: Union[str, Path]) -> int:
        """Load a WAVE file and return its handle."""
        self._sounds.append(load_wave(path))
        self._pending.append(False)
        return len(self._sounds) - 1

    def unload(self, handle: int) -> SoundData:
        """Forget a sound and return it; later handles shift down by one."""
        self._check(handle)
        self._pending.pop(handle)
        return self._sounds.pop(handle)

    def request(self, handle: int) -> None:
        """Ask for a sound to be played."""
        self._check(handle)
        self._pending[handle] = True

    def take_pending(self) -> Optional[SoundData]:
        """Return and clear the first requested sound, or None."""
        for handle, pending in enumerate(self._pending):
            if pending:
                self._pending[handle] = False
                return self._sounds[handle]
        return None