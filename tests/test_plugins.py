import pytest
from PIL import Image as PILImage

from stegframe.data import DataFormat
from stegframe.encodeddata import EncodedData
from stegframe.image import Image
from stegframe.plugins import (
    AudioModuleInterface,
    CryptoModuleInterface,
    FormatModuleInterface,
    ImageModuleInterface,
    ModuleInterface,
    VideoModuleInterface,
)
from stegframe.video import Video


class _Info:
    def name(self):
        return "Sample"

    def version(self):
        return "1.0"

    def type_supported(self):
        return "XOR"

    def status(self):
        return "OK"


class XorCrypto(_Info, CryptoModuleInterface):
    def _apply(self, key, data):
        key_bytes = key.encode("utf-8")
        raw = data.buffer
        mixed = bytes(b ^ key_bytes[i % len(key_bytes)] for i, b in enumerate(raw))
        return EncodedData.from_bytes(mixed, DataFormat.UINT32)

    def encode(self, key, message):
        return self._apply(key, message)

    def decode(self, key, data):
        return self._apply(key, data)


class _Widgets:
    def encode_widget(self):
        return "encode"

    def is_encode_widget_ready(self):
        return True

    def decode_widget(self):
        return "decode"

    def is_decode_widget_ready(self):
        return False


class RenamingImagePlugin(_Info, _Widgets, ImageModuleInterface):
    def encode_image(self, image, debug=False):
        image.compute_new_file_name("png")
        return image

    def decode_image(self, image, debug=False):
        image.is_data_loaded = True
        return image


class TouchVideoPlugin(_Info, _Widgets, VideoModuleInterface):
    def encode_video(self, video, debug=False):
        video.length = 1
        return video

    def decode_video(self, video, debug=False):
        video.is_data_loaded = True
        return video


class _PartialImagePlugin(_Info, ImageModuleInterface):
    pass


@pytest.mark.parametrize(
    "interface",
    [
        ModuleInterface,
        FormatModuleInterface,
        ImageModuleInterface,
        AudioModuleInterface,
        VideoModuleInterface,
        CryptoModuleInterface,
    ],
)
def test_interfaces_are_abstract(interface):
    with pytest.raises(TypeError):
        interface()


def test_incomplete_plugin_cannot_be_created():
    with pytest.raises(TypeError):
        ImageModuleInterface.__new__(_PartialImagePlugin)
    missing = _PartialImagePlugin.__abstractmethods__
    assert {"encode_image", "decode_image", "encode_widget", "decode_widget"} <= set(missing)


def test_crypto_plugin_round_trip():
    plugin = XorCrypto()
    message = EncodedData.from_bytes(b"\x01\x02\x03\x04", DataFormat.UINT32)
    encrypted = plugin.encode("secret", message)
    assert encrypted.buffer != message.buffer
    decrypted = plugin.decode("secret", encrypted)
    assert decrypted.buffer == message.buffer
    assert plugin.status() == "OK"


def test_image_plugin_operates_on_image():
    plugin = RenamingImagePlugin()
    image = Image("dir/pic.bmp", PILImage.new("RGB", (2, 2)))
    result = plugin.encode_image(image)
    assert result.file_path == "dir/pic.png"
    assert plugin.decode_image(result).is_data_loaded is True
    assert plugin.is_encode_widget_ready() is True
    assert plugin.is_decode_widget_ready() is False


def test_video_plugin_operates_on_video():
    plugin = TouchVideoPlugin()
    video = plugin.encode_video(Video("v/clip.avi"), debug=True)
    assert video.length == 1
    assert plugin.decode_video(video).is_data_loaded is True


def test_option_changed_notifies_listeners():
    plugin = RenamingImagePlugin()
    calls = []
    FormatModuleInterface.connect_option_changed(plugin, lambda: calls.append("a"))
    FormatModuleInterface.connect_option_changed(plugin, lambda: calls.append("b"))
    FormatModuleInterface.option_changed(plugin)
    FormatModuleInterface.option_changed(plugin)
    assert calls == ["a", "b", "a", "b"]