"""Key/value application configuration stored as a small XML document."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from typing import Dict, Mapping, Optional, Union
from xml.sax.saxutils import escape

from .logger import Logger

_log = Logger("Config")

_INT_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]


class Config:
    """Configuration values read from and written to an XML file."""

    def __init__(
        self,
        values: Optional[Mapping[str, str]] = None,
        directory: PathLike = "/tmp/",
        filename: str = "se-noname.conf",
    ) -> None:
        self.directory = os.fspath(directory)
        self.filename = filename
        self._values: Dict[str, str] = dict(values or {})
        self.is_loaded = False

    @classmethod
    def from_file(
        cls, directory: PathLike, filename: str, has_ext: bool = False
    ) -> "Config":
        """Load ``filename`` (with ``.conf`` appended unless ``has_ext``)."""
        config = cls(directory=directory, filename=filename if has_ext else filename + ".conf")
        config.is_loaded = config._load(None)
        return config

    @classmethod
    def from_string(cls, content: str) -> "Config":
        """Load configuration from an XML string."""
        config = cls()
        config.is_loaded = config._load(content)
        return config

    @property
    def file_absolute_name(self) -> str:
        return os.path.join(self.directory, self.filename)

    @property
    def values(self) -> Dict[str, str]:
        return dict(sorted(self._values.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def get(self, name: str) -> str:
        return self._values.get(name, "")

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get_bool(self, name: str) -> bool:
        value = self.get(name)
        return value == "1" or value.lower() in ("true", "on")

    def get_int(self, name: str) -> int:
        """Integer value of ``name``; 0 when absent or not a 32-bit integer."""
        text = self.get(name).strip()
        if not _INT_RE.fullmatch(text):
            return 0
        number = int(text)
        if not _INT_MIN <= number <= _INT_MAX:
            return 0
        return number

    def is_empty(self, name: str) -> bool:
        return name not in self or self.get(name).strip() == ""

    def to_xml(self) -> str:
        lines = ["<!DOCTYPE SilentEye>", "<configuration>"]
        for key, value in sorted(self._values.items()):
            lines.append(f" <{key}>{escape(value)}</{key}>")
        lines.append("</configuration>")
        return "\n".join(lines) + "\n"

    def save(self) -> None:
        """Write the configuration to its file; a failure is logged."""
        try:
            with open(self.file_absolute_name, "w", encoding="utf-8") as handle:
                handle.write(self.to_xml())
        except OSError:
            _log.warning("Can't save configuration file to " + self.file_absolute_name)

    def _load(self, content: Optional[str]) -> bool:
        if content:
            try:
                root = ET.fromstring(content)
            except ET.ParseError:
                _log.warning("Can't load buffer content to xml document: " + content)
                return False
        else:
            try:
                with open(self.file_absolute_name, "rb") as handle:
                    raw = handle.read()
            except OSError:
                _log.warning("Can't open configuration file: " + self.file_absolute_name)
                return False
            try:
                root = ET.fromstring(raw)
            except ET.ParseError:
                _log.warning(
                    "Can't load file content to xml document (XML syntax error?): "
                    + self.file_absolute_name
                )
                return False

        for element in root:
            if isinstance(element.tag, str):
                self._values[element.tag] = "".join(element.itertext())
        return True