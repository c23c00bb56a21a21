# stegframe

stegframe is the common layer for steganography tools that hide messages
inside pictures and sound. It provides the pieces a hiding algorithm is built
from; it does not contain a hiding algorithm itself.

## What is in the package

- **`stegframe.encodeddata`**: `EncodedData` wraps a message (raw bytes via
  `from_bytes`, a 32-bit integer via `from_uint32`, a string via
  `from_string`, or a whole file via `from_file`) and can read it out, or
  rebuild it, a few bits at a time (`initialize`, `has_next`, `read`,
  `append`). The buffer is optionally compressed with `qcompress`: a 4-byte
  big-endian length followed by a zlib stream; `quncompress` reverses it and
  gives empty bytes for corrupted input. `set_compressed`, `clear`,
  `to_string`, `to_uint32` and `to_data` complete the class, and
  `and_operator(n)` returns the mask of the `n` lowest bits.
- **`stegframe.data`**: `Data` and `DataFormat` (`BYTES`, `UINT32`, `UTF8`,
  `LATIN1`, `ASCII`, `FILE`, `F_UNDEF`) describe a payload. `Data.to_bytes`
  prefixes it with its format digit (and `name<` for files, nothing for
  `UINT32`); `Data.from_bytes` decodes that form and raises
  `SilentEyeError` on an unknown or mismatching format.
- **`stegframe.media`**, **`stegframe.image`**, **`stegframe.video`**,
  **`stegframe.audio`**: carrier files. `Media` holds the path, short name
  and `encoded_data`; `file_name` and `compute_new_file_name` handle names.
  The base `capacity`, `load_data` and `save_to_dir` return `0`, `False` and
  `False`; format-specific code overrides them. `Image` loads a picture with
  Pillow (or takes one through `picture=`) and records `width` and `height`;
  an unreadable file leaves `picture` as `None` and the size at 0. `Video`
  adds a `length` field.
- **`stegframe.audio`**: `read_wave_header` parses and validates a 44-byte
  PCM WAVE header (`RIFF` identifier, format 1, 8 or 16 bits per sample) into
  a `WaveHeader`, which exposes `duration`, `bit_rate`, `sample_count`,
  `sample_type` and serializes back with `to_bytes`. `Audio` opens a file,
  reads its header, iterates over samples with `samples(skip)` and writes the
  header with `write_wave_header`. Any other file raises `ModuleError`.
- **`stegframe.plugins`**: abstract interfaces for plug-ins:
  `ModuleInterface`, `FormatModuleInterface` (with `connect_option_changed`
  and `option_changed` for option listeners), `ImageModuleInterface`,
  `AudioModuleInterface`, `VideoModuleInterface` and
  `CryptoModuleInterface`.
- **`stegframe.config`**: `Config`, a flat key/value store kept as child
  elements of a `<configuration>` XML document.
- **`stegframe.logger`**: `Logger` with the levels of `LogLevel`, set
  globally by `set_level` (a `LogLevel`, an int or a level name; unknown
  names mean `DEBUG`) and read by `get_level`. Lines go to standard error and
  to a log file, `application.log` in the working directory unless
  `set_log_file` names another; the file is truncated on the first write.
- **`stegframe.updates`**: `parse_release_info` turns a release description
  into a `ReleaseInfo`, `read_current_version` reads `version.xml` from a
  directory, `fetch_release_info` downloads a description (following
  redirections, or using a `fetch` callable you supply), and `download_link`
  picks the link for a platform.
- **`stegframe.errors`**: `SilentEyeError` and its subclass `ModuleError`,
  both carrying `message` and `details`.

## Splitting a message into bits and back

```python
from stegframe.data import DataFormat
from stegframe.encodeddata import EncodedData

message = EncodedData.from_string("meet at noon", DataFormat.UTF8, True)
message.initialize(2)

pieces = []
while message.has_next():
    pieces.append(message.read())   # two bits at a time, lowest first

rebuilt = EncodedData(DataFormat.UTF8, True)
rebuilt.initialize(2)
for value in pieces:
    rebuilt.append(value)

print(rebuilt.to_string(DataFormat.UTF8))   # "meet at noon"
```

A hiding algorithm stores each value returned by `read()` in a carrier (for
example the low bits of pixels or audio samples) and, on the way back, feeds
the recovered values to `append()`.

## Reading a WAVE carrier

```python
from stegframe.audio import Audio

audio = Audio("voice.wav")
print(audio.duration, audio.bit_rate, audio.sample_count())
for sample in audio.samples(0):
    ...   # a tuple with one value per channel
```

## Configuration

```python
from stegframe.config import Config

config = Config.from_file("./", "settings", False)   # reads ./settings.conf
if config.is_loaded and config.get_bool("compress"):
    level = config.get_int("level")                  # 0 if not an integer
config.set("lastdir", "/tmp")
config.save()
```

`get` returns an empty string for a missing key; `get_bool` accepts `1`,
`true` and `on`. `Config.from_string` reads the same XML from a string.

## Writing a plug-in

Subclass one of the interfaces in `stegframe.plugins` and implement its
abstract methods, for instance `name`, `version`, `type_supported`, `status`,
`encode` and `decode` for a `CryptoModuleInterface`.

## What the package does not do

- It contains no steganography or encryption algorithm: no concrete image,
  audio, video or crypto plug-in is included, only the interfaces.
- It has no graphical interface and no command-line program; it is a library
  to be imported.
- `Audio` reads WAVE headers and samples but does not write sample data or
  hide anything in it, and `Video` only records a path and a length.