"""Checking for a newer release: version files and release descriptions."""

from __future__ import annotations

import os
import sys
import urllib.request
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple, Union
from urllib.parse import urljoin

from .config import Config
from .errors import SilentEyeError
from .logger import Logger

_log = Logger("UpdateDialog")

UNKNOWN = "Unknown"
_MAX_REDIRECTS = 20
_LINK_KEYS = ("win", "lin", "mac")

Body = Union[str, bytes]
Fetcher = Callable[[str], Tuple[Body, Optional[str]]]


@dataclass
class ReleaseInfo:
    """A release as described by an update document."""

    name: str = ""
    date: str = ""
    release_note: str = ""
    links: Dict[str, str] = field(default_factory=dict)


def parse_release_info(content: str) -> ReleaseInfo:
    """Read a release description from its XML document.

    Missing entries, or a document that cannot be parsed, give empty fields.
    """
    if not content.strip():
        return ReleaseInfo()
    conf = Config.from_string(content)
    return ReleaseInfo(
        name=conf.get("name"),
        date=conf.get("date"),
        release_note=conf.get("releasenote").strip(),
        links={key: conf.get("link-" + key) for key in _LINK_KEYS},
    )


def read_current_version(directory: Union[str, "os.PathLike[str]"]) -> Tuple[str, str]:
    """Name and date from ``version.xml`` in ``directory``; ``Unknown`` if unreadable."""
    _log.info("Version file path: " + os.fspath(directory))
    version = Config.from_file(directory, "version.xml", has_ext=True)
    if version.is_loaded:
        return version.get("name"), version.get("date")
    return UNKNOWN, UNKNOWN


def _urllib_fetch(url: str) -> Tuple[bytes, Optional[str]]:
    with urllib.request.urlopen(url, timeout=30) as response:
        return response.read(), None


def fetch_release_info(url: str, fetch: Optional[Fetcher] = None) -> ReleaseInfo:
    """Download and parse the release description at ``url``.

    ``fetch`` takes a URL and returns the body and, for a redirection, the
    target (relative targets are resolved against the current URL). Network
    failures raised as :class:`OSError` become :class:`SilentEyeError`.
    """
    fetcher = fetch or _urllib_fetch
    current = url
    for _ in range(_MAX_REDIRECTS + 1):
        _log.debug("Download: " + current)
        try:
            body, redirect = fetcher(current)
        except OSError as exc:
            _log.error("Download failed: " + str(exc))
            raise SilentEyeError("check failed: " + str(exc), str(exc)) from exc
        if redirect:
            current = urljoin(current, redirect)
            _log.debug("redirect: " + current)
            continue
        _log.debug("Finished")
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        return parse_release_info(body.strip())
    raise SilentEyeError("check failed: too many redirections", current)


def _platform_key(platform: str) -> Optional[str]:
    if platform in _LINK_KEYS:
        return platform
    if platform.startswith(("win", "cygwin")):
        return "win"
    if platform == "darwin":
        return "mac"
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd", "sunos")):
        return "lin"
    return None


def download_link(info: ReleaseInfo, platform: Optional[str] = None) -> Optional[str]:
    """Download link of ``info`` for ``platform`` (defaults to this system).

    ``platform`` is a ``sys.platform`` value or one of ``win``, ``lin``,
    ``mac``; None is returned for a platform without a dedicated link.
    """
    key = _platform_key(sys.platform if platform is None else platform)
    if key is None:
        return None
    return info.links.get(key, "")