import pytest

from stegframe.data import Data, DataFormat
from stegframe.errors import SilentEyeError


@pytest.mark.parametrize(
    "fmt",
    [DataFormat.BYTES, DataFormat.UTF8, DataFormat.LATIN1, DataFormat.ASCII],
)
def test_text_formats_start_with_format_digit(fmt):
    payload = b"payload"
    wire = Data(fmt, payload).to_bytes()
    assert wire[:1] == str(int(fmt)).encode()
    assert wire[1:] == payload


def test_file_layout_holds_name_and_separator():
    wire = Data(DataFormat.FILE, b"abc", "notes.txt").to_bytes()
    assert wire == b"5notes.txt<abc"


@pytest.mark.parametrize("fmt", [DataFormat.UINT32, DataFormat.F_UNDEF])
def test_headerless_formats(fmt):
    payload = b"\x01\x02\x03\x04"
    assert Data(fmt, payload).to_bytes() == payload


@pytest.mark.parametrize(
    "original",
    [
        Data(DataFormat.BYTES, b"\x00\xff\x10"),
        Data(DataFormat.UTF8, "héllo".encode("utf-8")),
        Data(DataFormat.LATIN1, "caf\xe9".encode("latin-1")),
        Data(DataFormat.ASCII, b"plain"),
        Data(DataFormat.FILE, b"content<with<marks", "report.bin"),
        Data(DataFormat.FILE, b"", "empty.txt"),
    ],
)
def test_round_trip(original):
    decoded = Data.from_bytes(original.to_bytes())
    assert decoded == original


def test_round_trip_with_expected_format():
    original = Data(DataFormat.UTF8, b"text")
    decoded = Data.from_bytes(original.to_bytes(), DataFormat.UTF8)
    assert decoded == original


def test_empty_bytes_give_undefined_format():
    decoded = Data.from_bytes(b"")
    assert decoded.format == DataFormat.F_UNDEF
    assert decoded.data == b""


def test_uint32_keeps_raw_bytes():
    raw = b"2abc"
    decoded = Data.from_bytes(raw, DataFormat.UINT32)
    assert decoded.format == DataFormat.UINT32
    assert decoded.data == raw


@pytest.mark.parametrize("raw", [b"9abc", b"6abc", b"\xffabc", b"/abc"])
def test_unknown_format_raises(raw):
    with pytest.raises(SilentEyeError) as excinfo:
        Data.from_bytes(raw)
    assert excinfo.value.details.startswith("Data format unknown")


def test_unknown_format_details_value():
    with pytest.raises(SilentEyeError) as excinfo:
        Data.from_bytes(b"9abc")
    assert excinfo.value.details == "Data format unknown (9)"


def test_format_mismatch_raises():
    wire = Data(DataFormat.LATIN1, b"x").to_bytes()
    with pytest.raises(SilentEyeError) as excinfo:
        Data.from_bytes(wire, DataFormat.UTF8)
    assert "dismatch" in excinfo.value.details


def test_file_without_separator_has_no_name():
    decoded = Data.from_bytes(b"5nodelimiter")
    assert decoded.format == DataFormat.FILE
    assert decoded.name == ""
    assert decoded.data == b"nodelimiter"


def test_file_name_stops_at_nul():
    decoded = Data.from_bytes(b"5a\0b<xyz")
    assert decoded.name == "a"
    assert decoded.data == b"xyz"