"""Video media."""

from __future__ import annotations

from typing import Optional

from .media import Media, MediaType, PathLike


class Video(Media):
    """A video that can load and hide data according to its format."""

    media_type = MediaType.VIDEO

    def __init__(self, file_path: Optional[PathLike] = None) -> None:
        super().__init__(file_path)
        self.length = 0