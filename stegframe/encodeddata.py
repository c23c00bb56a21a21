"""Bit-level reader and writer over an optionally compressed payload."""

from __future__ import annotations

import os
import struct
import zlib
from pathlib import Path
from typing import Union

from .data import Data, DataFormat, _c_string
from .errors import SilentEyeError


def qcompress(data: bytes, level: int = 9) -> bytes:
    """Compress with zlib behind a 4-byte big-endian length prefix."""
    data = bytes(data)
    if not data:
        return b"\0\0\0\0"
    level = max(-1, min(level, 9))
    return struct.pack(">I", len(data)) + zlib.compress(data, level)


def quncompress(data: bytes) -> bytes:
    """Inverse of :func:`qcompress`; corrupted input gives empty bytes."""
    data = bytes(data)
    if len(data) <= 4:
        return b""
    try:
        return zlib.decompress(data[4:])
    except zlib.error:
        return b""


def and_operator(nb_bits: int) -> int:
    """Mask selecting the ``nb_bits`` lowest bits."""
    return ((1 << nb_bits) - 1) & 0xFFFF


class EncodedData:
    """Payload buffer that can be read or built a few bits at a time.

    Reading: build from content, call :meth:`initialize`, then :meth:`read`
    while :meth:`has_next`. Building: start empty, call :meth:`initialize`,
    then :meth:`append` each chunk of bits.
    """

    def __init__(
        self,
        data_format: DataFormat = DataFormat.F_UNDEF,
        compressed: bool = False,
    ) -> None:
        self._compressed = compressed
        self._buffer = bytearray()
        self._data = Data(data_format)
        self._partial = True
        self._swap = 2
        self._mask = and_operator(self._swap)
        self._array_count = 0
        self._bit_count = 0
        self._car = 0

    @classmethod
    def _complete(cls, data: Data, compressed: bool) -> "EncodedData":
        encoded = cls(data.format, compressed)
        encoded._data = data
        wire = data.to_bytes()
        encoded._buffer = bytearray(qcompress(wire, 9) if compressed else wire)
        encoded._partial = False
        return encoded

    @classmethod
    def from_bytes(
        cls,
        raw: bytes,
        data_format: DataFormat = DataFormat.BYTES,
        compressed: bool = False,
    ) -> "EncodedData":
        """Wrap raw bytes; with ``F_UNDEF`` the bytes are decoded as wire form."""
        if data_format == DataFormat.F_UNDEF:
            encoded = cls(data_format, compressed)
            encoded._data = Data.from_bytes(raw, data_format)
            encoded._partial = False
            return encoded
        return cls._complete(Data(data_format, bytes(raw)), compressed)

    @classmethod
    def from_uint32(cls, value: int, compressed: bool = False) -> "EncodedData":
        raw = (value & 0xFFFFFFFF).to_bytes(4, "little")
        return cls._complete(Data(DataFormat.UINT32, raw), compressed)

    @classmethod
    def from_string(
        cls,
        text: str,
        data_format: DataFormat = DataFormat.UTF8,
        compressed: bool = True,
    ) -> "EncodedData":
        if data_format == DataFormat.UTF8:
            raw = text.encode("utf-8")
        elif data_format == DataFormat.LATIN1:
            raw = text.encode("latin-1", errors="replace")
        else:
            raw = text.encode("ascii", errors="replace")
        return cls._complete(Data(data_format, raw), compressed)

    @classmethod
    def from_file(
        cls, path: Union[str, "os.PathLike[str]"], compressed: bool = True
    ) -> "EncodedData":
        """Wrap a file's content, keeping its base name."""
        content = Path(path).read_bytes()
        name = os.fspath(path).replace(os.sep, "/").rsplit("/", 1)[-1]
        return cls._complete(Data(DataFormat.FILE, content, name), compressed)

    def _check_partial(self) -> None:
        if self._partial:
            raw = quncompress(self._buffer) if self._compressed else bytes(self._buffer)
            self._data = Data.from_bytes(raw, self._data.format)
            self._partial = False

    @property
    def format(self) -> DataFormat:
        self._check_partial()
        return self._data.format

    @property
    def is_compressed(self) -> bool:
        return self._compressed

    @property
    def buffer(self) -> bytes:
        """Encoded bytes as they are hidden in a medium."""
        return bytes(self._buffer)

    @property
    def size(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def set_compressed(self, compress: bool, force: bool = False) -> None:
        """Change the compression mode; with ``force`` the buffer is converted."""
        if force:
            if not self._compressed and compress:
                self._buffer = bytearray(qcompress(self._buffer, 9))
            elif self._compressed and not compress:
                self._buffer = bytearray(quncompress(self._buffer))
        self._compressed = compress

    def clear(self) -> None:
        """Drop all content and cancel any read or append in progress."""
        self._array_count = 0
        self._bit_count = 0
        self._car = 0
        self._buffer = bytearray()
        self._data = Data(DataFormat.F_UNDEF)

    def initialize(self, nb_bits: int = 2) -> None:
        """Prepare to read or append ``nb_bits`` bits at a time."""
        self._swap = nb_bits
        self._mask = and_operator(nb_bits)
        self._array_count = 0
        self._bit_count = 0
        if self._buffer:
            self._car = self._buffer[0]

    def has_next(self) -> bool:
        return bool(self._buffer) and self._array_count < len(self._buffer)

    def read(self) -> int:
        """Next chunk of bits, least significant first; 0 when exhausted."""
        if not self.has_next():
            return 0
        last = len(self._buffer) - 1
        bits_left = 8 - self._bit_count
        if bits_left < self._swap:
            value = self._car & and_operator(bits_left)
            remaining = self._swap - bits_left
            if self._array_count < last:
                self._car = self._buffer[self._array_count + 1]
                value += (self._car & and_operator(remaining)) << bits_left
                self._car >>= remaining
                self._bit_count = remaining
            self._array_count += 1
        else:
            value = self._car & self._mask
            if self._bit_count + self._swap >= 8:
                self._bit_count = 0
                if self._array_count < last:
                    self._car = self._buffer[self._array_count + 1]
                self._array_count += 1
            else:
                self._car >>= self._swap
                self._bit_count += self._swap
        return value

    def append(self, value: int) -> None:
        """Append a chunk of bits, least significant first."""
        self._partial = True
        bits_left = 8 - self._bit_count
        split = bits_left < self._swap
        full = value
        if split:
            value &= and_operator(bits_left)

        self._car = (self._car + (value << self._bit_count)) & 0xFF
        if self._bit_count + self._swap >= 8:
            self._buffer.append(self._car)
            self._array_count += 1
            self._bit_count = 0
            self._car = 0
        else:
            self._bit_count += self._swap

        if split:
            self._car = (self._car + (full >> bits_left)) & 0xFF
            self._bit_count += self._swap - bits_left

    def to_uint32(self) -> int:
        self._check_partial()
        return int.from_bytes(self._data.data[:4], "little")

    def to_string(self, data_format: DataFormat = DataFormat.F_UNDEF) -> str:
        """Text of the payload (or the file name for files)."""
        self._check_partial()
        fmt = self._data.format if data_format == DataFormat.F_UNDEF else data_format
        raw = self._data.data
        if self.size > 0 and not raw:
            raise SilentEyeError(
                "Cannot uncompress data",
                "check other options and make sure the given image include a compressed message.",
            )
        if fmt == DataFormat.UTF8:
            return _c_string(raw).decode("utf-8", errors="replace")
        if fmt == DataFormat.LATIN1:
            return _c_string(raw).decode("latin-1")
        if fmt == DataFormat.ASCII:
            return _c_string(raw).decode("ascii", errors="replace")
        if fmt == DataFormat.FILE:
            return self._data.name
        return f"unsupported format({int(fmt)}) for string conversion."

    def to_data(self) -> Data:
        self._check_partial()
        return self._data