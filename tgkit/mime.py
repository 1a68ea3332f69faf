"""MIME type lookup by extension, remote header or content sniffing."""

from __future__ import annotations

import os
import re
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional

_USER_AGENT = "Mozilla/5.0 (Windows NT 6.1; rv:60.0) Gecko/20100101 Firefox/60.0"
_URL_TIMEOUT = 4.0
_SNIFF_LEN = 512

_BUILTIN_TYPES = (
    (".png", "image/png"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".webp", "image/webp"),
    (".gif", "image/gif"),
    (".bmp", "image/bmp"),
    (".tga", "image/x-tga"),
    (".tiff", "image/tiff"),
    (".psd", "image/vnd.adobe.photoshop"),
    (".mp4", "video/mp4"),
    (".mov", "video/quicktime"),
    (".avi", "video/avi"),
    (".flv", "video/x-flv"),
    (".m4v", "video/x-m4v"),
    (".mkv", "video/x-matroska"),
    (".webm", "video/webm"),
    (".3gp", "video/3gpp"),
    (".mp3", "audio/mpeg"),
    (".m4a", "audio/m4a"),
    (".aac", "audio/aac"),
    (".ogg", "audio/ogg"),
    (".flac", "audio/x-flac"),
    (".opus", "audio/opus"),
    (".wav", "audio/wav"),
    (".alac", "audio/x-alac"),
    (".tgs", "application/x-tgsticker"),
)

_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1",
    b"<DIV", b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B",
    b"<BODY", b"<BR", b"<P", b"<!--",
)

_EXACT_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"\x00\x00\x02\x00", "image/x-icon"),
    (b"BM", "image/bmp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"ID3", "audio/mpeg"),
    (b"OggS\x00", "application/ogg"),
    (b"MThd\x00\x00\x00\x06", "audio/midi"),
    (b"\x1a\x45\xdf\xa3", "video/webm"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
    (b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    (b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
)

_RIFF_SIGNATURES = (
    (b"WEBPVP", "image/webp"),
    (b"AVI ", "video/avi"),
    (b"WAVE", "audio/wave"),
)

_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)

_PHONE = re.compile(r"\+?[0-9]{10,13}")


def _extension(path: str) -> str:
    base = path
    for sep in {"/", os.sep}:
        base = base.rsplit(sep, 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _is_mp4(data: bytes) -> bool:
    if len(data) < 12:
        return False
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0 or data[4:8] != b"ftyp":
        return False
    for start in range(8, box_size, 4):
        if start == 12:
            continue
        if data[start:start + 3] == b"mp4":
            return True
    return False


def _sniff(data: bytes) -> str:
    """Guess a content type from the leading bytes of a file."""
    stripped = data.lstrip(b"\t\n\x0c\r ")
    upper = stripped.upper()
    for tag in _HTML_TAGS:
        if upper.startswith(tag) and len(stripped) > len(tag) and stripped[len(tag)] in b" >":
            return "text/html; charset=utf-8"
    if stripped.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"
    for prefix, mime in _EXACT_SIGNATURES:
        if data.startswith(prefix):
            return mime
    if data.startswith(b"RIFF"):
        for tag, mime in _RIFF_SIGNATURES:
            if data[8:8 + len(tag)] == tag:
                return mime
    if data.startswith(b"FORM") and data[8:12] == b"AIFF":
        return "audio/aiff"
    if _is_mp4(data):
        return "video/mp4"
    if not any(byte in _BINARY_BYTES for byte in data):
        return "text/plain; charset=utf-8"
    return "application/octet-stream"


class MimeTypeManager:
    """Maps file extensions to MIME types and detects the type of files and URLs."""

    def __init__(self, mime_types: Optional[dict[str, str]] = None) -> None:
        self.mime_types: dict[str, str] = (
            dict(_BUILTIN_TYPES) if mime_types is None else dict(mime_types)
        )

    def add_mime(self, ext: str, mime: str) -> None:
        """Register ``mime`` for the extension ``ext`` (with its leading dot)."""
        self.mime_types[ext] = mime

    def match(self, file_path: str) -> str:
        """Return the MIME type of a file or URL, or an empty string if unknown."""
        if is_url(file_path):
            return self._remote_type(file_path)
        known = self.mime_types.get(_extension(file_path))
        if known is not None:
            return known
        try:
            with open(file_path, "rb") as handle:
                head = handle.read(_SNIFF_LEN)
        except OSError:
            return ""
        if not head:
            return ""
        return _sniff(head.ljust(_SNIFF_LEN, b"\x00"))

    @staticmethod
    def _remote_type(url: str) -> str:
        request = urllib.request.Request(
            url, headers={"User-Agent": _USER_AGENT}, method="GET"
        )
        try:
            with urllib.request.urlopen(request, timeout=_URL_TIMEOUT) as response:
                if response.status == 200:
                    return response.headers.get("Content-Type") or ""
        except (OSError, ValueError):
            return ""
        return ""

    def ext(self, mime: str) -> str:
        """Return the first extension registered for ``mime``, or an empty string."""
        return next((ext for ext, known in self.mime_types.items() if known == mime), "")

    def is_photo(self, mime: str) -> bool:
        """True for image types that are sent as photos (everything but WebP)."""
        return mime.startswith("image/") and "image/webp" not in mime

    def mime(self, file_path: str) -> tuple[str, bool]:
        """Return the MIME type of ``file_path`` and whether it is a photo."""
        found = self.match(file_path)
        return found, self.is_photo(found)


mime_types = MimeTypeManager()


def is_url(text: str) -> bool:
    """True if ``text`` parses as a URL with both a scheme and a host."""
    try:
        parsed = urllib.parse.urlparse(text)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_phone(text: str) -> bool:
    """True if ``text`` looks like a phone number: 10 to 13 digits, optional '+'."""
    return _PHONE.fullmatch(text) is not None