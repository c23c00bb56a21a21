"""Media files (images, sounds, videos) that can carry a hidden payload."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional, Union

from .encodeddata import EncodedData

PathLike = Union[str, "os.PathLike[str]"]


class MediaType(Enum):
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    UNKNOWN = "unknown"


def _portable(path: PathLike) -> str:
    """Path text with the platform separator replaced by '/'."""
    text = os.fspath(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return text


def file_name(path: PathLike) -> str:
    """Last '/'-separated component of ``path``."""
    return _portable(path).rsplit("/", 1)[-1]


class Media:
    """A medium that can load and hide data according to its format.

    Format-specific subclasses override :meth:`capacity`,
    :meth:`load_data` and :meth:`save_to_dir`.
    """

    media_type = MediaType.UNKNOWN

    def __init__(self, file_path: Optional[PathLike] = None) -> None:
        if file_path is None:
            self.file_path = "/home/"
            self.short_name = "unamed"
        else:
            self.file_path = os.fspath(file_path)
            self.short_name = file_name(file_path)
        self.encoded_data: Optional[EncodedData] = None
        self.is_data_loaded = False

    @property
    def base_name(self) -> str:
        """Directory part of the file path (everything before the last '/')."""
        parts = _portable(self.file_path).split("/")
        return "/".join(parts[:-1])

    def capacity(self) -> int:
        """Number of payload bytes this medium can hide."""
        return 0

    def load_data(self) -> bool:
        """Extract hidden data from the medium; True on success."""
        return False

    def save_to_dir(self, output_dir: PathLike) -> bool:
        """Write the medium with its hidden data into ``output_dir``."""
        return False

    def compute_new_file_name(self, extension: str) -> None:
        """Replace the file extension in both the short name and the path."""
        stem = self.short_name.rsplit(".", 1)[0] if "." in self.short_name else ""
        self.short_name = f"{stem}.{extension}"
        self.file_path = f"{self.base_name}/{self.short_name}"