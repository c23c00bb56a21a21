"""Image media backed by a Pillow picture."""

from __future__ import annotations

from typing import Optional

from PIL import Image as PILImage

from .media import Media, MediaType, PathLike


class Image(Media):
    """An image that can load and hide data according to its format.

    A file that cannot be read leaves ``picture`` as None and the size at 0.
    ``quality`` (percent) is set by format plug-ins that use it.
    """

    media_type = MediaType.IMAGE

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        picture: Optional[PILImage.Image] = None,
    ) -> None:
        if picture is not None and file_path is None:
            file_path = "Pixmap"
        super().__init__(file_path)
        self.quality: Optional[int] = None
        if picture is None and file_path is not None:
            picture = self._open(self.file_path)
        self.picture = picture
        if picture is None:
            self.width = 0
            self.height = 0
        else:
            self.width, self.height = picture.size

    @staticmethod
    def _open(path: str) -> Optional[PILImage.Image]:
        try:
            with PILImage.open(path) as handle:
                handle.load()
                return handle.copy()
        except (OSError, ValueError):
            return None