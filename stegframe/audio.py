"""PCM WAVE sounds: header parsing, header writing and sample iteration."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, ClassVar, Iterator, Tuple

from .errors import ModuleError
from .media import Media, MediaType, PathLike

HEADER_LENGTH = 44
"""Length in bytes of the canonical WAVE header; samples start right after it."""

_INVALID = "Selected file is not in a valid/supported WAVE format."
_U32 = struct.Struct("<I")
_FMT = struct.Struct("<IHHIIHH")


class ByteOrder(Enum):
    """Byte order used to read and write sample values."""

    BIG = "big"
    LITTLE = "little"


class SampleType(Enum):
    UNSIGNED_INT = "unsigned"
    SIGNED_INT = "signed"


_CHUNK_IDS = {ByteOrder.BIG: b"RIFF", ByteOrder.LITTLE: b"RIFX"}


def _tag(raw: bytes) -> str:
    """Four-character chunk tag, read as a NUL-terminated string."""
    return raw.split(b"\0", 1)[0].decode("latin-1")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) < size:
        raise ModuleError(_INVALID, "WAVE header is truncated")
    return chunk


@dataclass
class WaveHeader:
    """Fields of a canonical 44-byte PCM WAVE header.

    ``byte_order`` is the order the framework associates with the chunk
    identifier: ``RIFF`` maps to :attr:`ByteOrder.BIG`, ``RIFX`` to
    :attr:`ByteOrder.LITTLE`. Header fields themselves are always
    little-endian.
    """

    total_size: int
    fmt_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_size: int
    byte_order: ByteOrder = ByteOrder.BIG

    codec: ClassVar[str] = "audio/pcm"

    @property
    def sample_type(self) -> SampleType:
        if self.bits_per_sample == 8:
            return SampleType.UNSIGNED_INT
        return SampleType.SIGNED_INT

    @property
    def duration(self) -> float:
        """Length of the recording in seconds."""
        per_second = self.sample_rate * self.num_channels
        if per_second == 0 or self.bits_per_sample == 0:
            return 0.0
        return (self.data_size / (self.bits_per_sample / 8.0)) / per_second

    @property
    def bit_rate(self) -> int:
        """Bit rate in bits per second."""
        duration = self.duration
        if duration == 0:
            return 0
        return math.floor((self.data_size * 8.0) / duration)

    @property
    def sample_count(self) -> int:
        """Number of samples (all channels together) in the data chunk."""
        per_sample = self.bits_per_sample * self.num_channels
        if per_sample == 0:
            return 0
        return math.floor((self.data_size * 8.0) / per_sample)

    def to_bytes(self) -> bytes:
        """Serialized 44-byte header."""
        return b"".join(
            (
                _CHUNK_IDS[self.byte_order],
                _U32.pack(self.total_size),
                b"WAVE",
                b"fmt ",
                _FMT.pack(
                    self.fmt_size,
                    self.audio_format,
                    self.num_channels,
                    self.sample_rate,
                    self.byte_rate,
                    self.block_align,
                    self.bits_per_sample,
                ),
                b"data",
                _U32.pack(self.data_size),
            )
        )


def read_wave_header(stream: BinaryIO) -> WaveHeader:
    """Read and validate a PCM WAVE header (8 or 16 bits per sample)."""
    identifier = _tag(stream.read(4))
    if identifier != "RIFF":
        raise ModuleError(
            _INVALID,
            "Identifier must be RIFF or RIFX (found: '" + identifier + "')",
        )
    byte_order = ByteOrder.BIG

    (total_size,) = _U32.unpack(_read_exact(stream, 4))

    if _tag(stream.read(4)) != "WAVE":
        raise ModuleError(
            "Selected file is not in a valid WAVE format.", 'Format must be "WAVE"!'
        )
    if _tag(stream.read(4)) != "fmt ":
        raise ModuleError(
            "Selected file is not in a valid WAVE format",
            'Subchunk1ID must be "fmt "!',
        )

    (
        fmt_size,
        audio_format,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
    ) = _FMT.unpack(_read_exact(stream, _FMT.size))

    if audio_format != 1 or fmt_size != 16:
        raise ModuleError(_INVALID, "Audio format must be 1 for PCM!")
    if bits_per_sample not in (8, 16):
        raise ModuleError(_INVALID, "BitsPerSample must be 8 or 16!")

    if _tag(stream.read(4)) != "data":
        raise ModuleError(_INVALID, 'Subchunk2ID mus be "data"!')
    (data_size,) = _U32.unpack(_read_exact(stream, 4))

    return WaveHeader(
        total_size=total_size,
        fmt_size=fmt_size,
        audio_format=audio_format,
        num_channels=num_channels,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        data_size=data_size,
        byte_order=byte_order,
    )


class Audio(Media):
    """A WAVE sound that can load and hide data according to its format."""

    media_type = MediaType.AUDIO

    def __init__(self, file_path: PathLike) -> None:
        super().__init__(file_path)
        try:
            with open(self.file_path, "rb") as handle:
                self.header = read_wave_header(handle)
        except OSError as exc:
            raise ModuleError(
                "Cannot read selected file: " + self.file_path,
                exc.strerror or str(exc),
            ) from exc

    @property
    def duration(self) -> float:
        return self.header.duration

    @property
    def bit_rate(self) -> int:
        return self.header.bit_rate

    @property
    def byte_order(self) -> ByteOrder:
        return self.header.byte_order

    @property
    def sample_type(self) -> SampleType:
        return self.header.sample_type

    def sample_count(self) -> int:
        return self.header.sample_count

    def samples(self, skip: int = 0) -> Iterator[Tuple[int, ...]]:
        """Yield every sample after the header, one value per channel.

        ``skip`` samples are passed over first. Values missing from an
        incomplete trailing sample are reported as 0.
        """
        channels = self.header.num_channels
        width = self.header.bits_per_sample // 8
        frame = channels * width
        if frame == 0:
            return
        prefix = ">" if self.header.byte_order is ByteOrder.BIG else "<"
        code = "B" if width == 1 else "H"
        try:
            handle = open(self.file_path, "rb")
        except OSError as exc:
            raise ModuleError(
                "Cannot read selected file: " + self.file_path,
                exc.strerror or str(exc),
            ) from exc
        with handle:
            handle.seek(HEADER_LENGTH + max(skip, 0) * frame)
            while True:
                chunk = handle.read(frame)
                if not chunk:
                    return
                if len(chunk) < frame:
                    count = len(chunk) // width
                    values = list(
                        struct.unpack(prefix + code * count, chunk[: count * width])
                    )
                    values.extend([0] * (channels - count))
                    yield tuple(values)
                    return
                yield struct.unpack(prefix + code * channels, chunk)

    def write_wave_header(self, stream: BinaryIO) -> None:
        """Write this sound's header to ``stream``."""
        stream.write(self.header.to_bytes())