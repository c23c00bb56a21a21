from stegframe.encodeddata import EncodedData
from stegframe.media import Media, MediaType, file_name


def test_file_name_takes_last_component():
    assert file_name("dir/sub/picture.bmp") == "picture.bmp"
    assert file_name("alone.wav") == "alone.wav"


def test_default_media():
    media = Media()
    assert media.short_name == "unamed"
    assert media.file_path == "/home/"
    assert media.media_type is MediaType.UNKNOWN
    assert media.is_data_loaded is False
    assert media.encoded_data is None


def test_media_from_path():
    media = Media("dir/sub/picture.bmp")
    assert media.short_name == "picture.bmp"
    assert media.file_path == "dir/sub/picture.bmp"
    assert media.base_name == "dir/sub"


def test_base_name_without_directory_is_empty():
    assert Media("picture.bmp").base_name == ""


def test_base_virtual_methods():
    media = Media("x/y.bmp")
    assert media.capacity() == 0
    assert media.load_data() is False
    assert media.save_to_dir("out") is False


def test_compute_new_file_name():
    media = Media("dir/sub/picture.bmp")
    media.compute_new_file_name("png")
    assert media.short_name == "picture.png"
    assert media.file_path == "dir/sub/picture.png"


def test_compute_new_file_name_keeps_inner_dots():
    media = Media("dir/a.b.bmp")
    media.compute_new_file_name("wav")
    assert media.short_name == "a.b.wav"
    assert media.file_path == "dir/a.b.wav"


def test_compute_new_file_name_without_extension():
    media = Media("dir/noext")
    media.compute_new_file_name("png")
    assert media.short_name == ".png"


def test_encoded_data_can_be_attached():
    media = Media("a/b.bmp")
    payload = EncodedData.from_string("hello", compressed=False)
    media.encoded_data = payload
    assert media.encoded_data.to_string() == "hello"