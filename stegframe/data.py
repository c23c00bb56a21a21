"""Typed payload carried inside a media file, with its wire representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import SilentEyeError


class DataFormat(IntEnum):
    BYTES = 0
    UINT32 = 1
    UTF8 = 2
    LATIN1 = 3
    ASCII = 4
    FILE = 5
    F_UNDEF = 7


_DIGIT_ZERO = ord("0")
_PREFIXED = {
    DataFormat.BYTES,
    DataFormat.UTF8,
    DataFormat.LATIN1,
    DataFormat.ASCII,
}


def _c_string(raw: bytes) -> bytes:
    """Bytes up to the first NUL, as a C string would be read."""
    return raw.split(b"\0", 1)[0]


@dataclass
class Data:
    """A payload with its format and, for files, its file name."""

    format: DataFormat = DataFormat.F_UNDEF
    data: bytes = b""
    name: str = ""

    @classmethod
    def from_bytes(
        cls, raw: bytes, expected: DataFormat = DataFormat.F_UNDEF
    ) -> "Data":
        """Decode a payload from its wire form.

        ``UINT32`` payloads carry no header; every other non-empty payload
        starts with its format digit, and files with ``name<`` after it.
        """
        raw = bytes(raw)
        if expected == DataFormat.UINT32:
            return cls(DataFormat.UINT32, raw)
        if not raw:
            return cls(DataFormat.F_UNDEF, raw)

        lead = raw[0] - 256 if raw[0] >= 128 else raw[0]
        code = lead - _DIGIT_ZERO
        try:
            found = DataFormat(code)
        except ValueError:
            raise SilentEyeError(
                "Loaded informations are invalid! Check your options...",
                f"Data format unknown ({code})",
            ) from None
        if expected != DataFormat.F_UNDEF and expected != found:
            raise SilentEyeError(
                "Requested format doesn't match loaded informations! Check your options...",
                f"Data format dismatch ({int(found)}!={int(expected)})",
            )

        body = raw[1:]
        if found == DataFormat.FILE:
            head, sep, payload = body.partition(b"<")
            if not sep:
                return cls(found, body, "")
            name = _c_string(head).decode("utf-8", errors="replace")
            return cls(found, payload, name)
        return cls(found, body, "")

    def to_bytes(self) -> bytes:
        """Wire form of this payload (inverse of :meth:`from_bytes`)."""
        digit = bytes([_DIGIT_ZERO + int(self.format)])
        if self.format in _PREFIXED:
            return digit + self.data
        if self.format == DataFormat.FILE:
            return digit + (self.name + "<").encode("utf-8") + self.data
        return bytes(self.data)