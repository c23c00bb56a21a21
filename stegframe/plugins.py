"""Interfaces that format and cryptography plug-ins implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, List

from .encodeddata import EncodedData
from .image import Image
from .video import Video

if TYPE_CHECKING:
    from .audio import Audio


class ModuleInterface(ABC):
    """Common interface of every plug-in."""

    @abstractmethod
    def name(self) -> str:
        """Plug-in name."""

    @abstractmethod
    def version(self) -> str:
        """Plug-in version, e.g. ``1.2.0``."""

    @abstractmethod
    def type_supported(self) -> str:
        """Supported type, e.g. ``BMP`` or ``AES128``."""

    @abstractmethod
    def status(self) -> str:
        """Current status, e.g. ``OK`` or ``KO|reason``."""


class FormatModuleInterface(ModuleInterface):
    """Common interface of media format plug-ins.

    Listeners registered with :meth:`connect_option_changed` are called
    whenever the plug-in reports an option change.
    """

    def __init__(self) -> None:
        self._option_listeners: List[Callable[[], Any]] = []

    @abstractmethod
    def encode_widget(self) -> Any:
        """Options widget shown when hiding data."""

    @abstractmethod
    def is_encode_widget_ready(self) -> bool:
        """Whether the encode options are complete."""

    @abstractmethod
    def decode_widget(self) -> Any:
        """Options widget shown when extracting data."""

    @abstractmethod
    def is_decode_widget_ready(self) -> bool:
        """Whether the decode options are complete."""

    def connect_option_changed(self, listener: Callable[[], Any]) -> None:
        self._option_listeners.append(listener)

    def option_changed(self) -> None:
        """Notify every listener that an option changed."""
        for listener in list(self._option_listeners):
            listener()


class ImageModuleInterface(FormatModuleInterface):
    """Common interface of image format plug-ins."""

    @abstractmethod
    def encode_image(self, image: Image, debug: bool = False) -> Image:
        """Hide the image's encoded data, returning the new image."""

    @abstractmethod
    def decode_image(self, image: Image, debug: bool = False) -> Image:
        """Extract hidden data from the image."""


class AudioModuleInterface(FormatModuleInterface):
    """Common interface of audio format plug-ins."""

    @abstractmethod
    def encode_audio(self, audio: "Audio", debug: bool = False) -> "Audio":
        """Hide the sound's encoded data, returning the new sound."""

    @abstractmethod
    def decode_audio(self, audio: "Audio", debug: bool = False) -> "Audio":
        """Extract hidden data from the sound."""


class VideoModuleInterface(FormatModuleInterface):
    """Common interface of video format plug-ins."""

    @abstractmethod
    def encode_video(self, video: Video, debug: bool = False) -> Video:
        """Hide the video's encoded data, returning the new video."""

    @abstractmethod
    def decode_video(self, video: Video, debug: bool = False) -> Video:
        """Extract hidden data from the video."""


class CryptoModuleInterface(ModuleInterface):
    """Common interface of cryptography plug-ins."""

    @abstractmethod
    def encode(self, key: str, message: EncodedData) -> EncodedData:
        """Encrypt ``message`` with ``key``."""

    @abstractmethod
    def decode(self, key: str, data: EncodedData) -> EncodedData:
        """Decrypt ``data`` with ``key``."""