"""Compact bot file identifiers for photos and documents."""

from __future__ import annotations

import base64
import binascii
import re
import struct
from typing import Any, NamedTuple, Optional

from tgkit.types import (
    Document,
    DocumentAttributeAnimated,
    DocumentAttributeAudio,
    DocumentAttributeSticker,
    DocumentAttributeVideo,
    MessageMediaDocument,
    MessageMediaPhoto,
    Photo,
)

_LAYOUT = struct.Struct("<IQQ")
_URL_ALPHABET = re.compile(rb"[A-Za-z0-9_-]*")
_DIGITS = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_PHOTO = 2
_DOCUMENT_TYPES = (3, 4, 5, 8, 9, 10, 13)


class UnpackedFileId(NamedTuple):
    """The parts stored in a bot file id."""

    id: int = 0
    access_hash: int = 0
    file_type: int = 0
    dc_id: int = 0


def _signed64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= (1 << 63) else value


def _signed32(value: int) -> int:
    value &= (1 << 32) - 1
    return value - (1 << 32) if value >= (1 << 31) else value


def _document_file_type(document: Document) -> int:
    for attr in document.attributes:
        if isinstance(attr, DocumentAttributeAudio):
            return 3 if attr.voice else 9
        if isinstance(attr, DocumentAttributeVideo):
            return 13 if attr.round_message else 4
        if isinstance(attr, DocumentAttributeSticker):
            return 8
        if isinstance(attr, DocumentAttributeAnimated):
            return 10
    return 5


def pack_bot_file_id(file: Any) -> str:
    """Pack a photo, document or media wrapper into a file id; empty if not possible."""
    if isinstance(file, MessageMediaDocument):
        file = file.document
    elif isinstance(file, MessageMediaPhoto):
        file = file.photo

    if isinstance(file, Document):
        file_type = _document_file_type(file)
    elif isinstance(file, Photo):
        file_type = _PHOTO
    else:
        return ""

    if not (file.id and file.access_hash and file_type and file.dc_id):
        return ""

    header = (file_type | (file.dc_id << 24)) & 0xFFFFFFFF
    raw = _LAYOUT.pack(
        header,
        file.id & 0xFFFFFFFFFFFFFFFF,
        file.access_hash & 0xFFFFFFFFFFFFFFFF,
    )
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode(file_id: str) -> Optional[bytes]:
    encoded = file_id.encode("ascii", "replace")
    if not _URL_ALPHABET.fullmatch(encoded) or len(encoded) % 4 == 1:
        return None
    padded = encoded + b"=" * (-len(encoded) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError):
        return None


def _parse_int(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def unpack_bot_file_id(file_id: str) -> UnpackedFileId:
    """Split a file id into its parts; all zeros if it cannot be read."""
    data = _decode(file_id)
    if data is None:
        return UnpackedFileId()

    if len(data) == _LAYOUT.size:
        header, raw_id, raw_hash = _LAYOUT.unpack(data)
        return UnpackedFileId(
            id=_signed64(raw_id),
            access_hash=_signed64(raw_hash),
            file_type=header & 0x00FFFFFF,
            dc_id=(header >> 24) & 0xFF,
        )

    parts = data.decode("utf-8", "replace").split("_", 3)
    if len(parts) == 4:
        file_type, dc_id, raw_id, raw_hash = (_parse_int(p) for p in parts)
        return UnpackedFileId(
            id=raw_id,
            access_hash=raw_hash,
            file_type=_signed32(file_type),
            dc_id=_signed32(dc_id),
        )

    return UnpackedFileId()


def _attributes_for(file_type: int) -> list:
    if file_type == 3:
        return [DocumentAttributeAudio(voice=True)]
    if file_type == 4:
        return [DocumentAttributeVideo(round_message=False)]
    if file_type == 8:
        return [DocumentAttributeSticker()]
    if file_type == 9:
        return [DocumentAttributeAudio()]
    if file_type == 10:
        return [DocumentAttributeAnimated()]
    if file_type == 13:
        return [DocumentAttributeVideo(round_message=True)]
    return []


def resolve_bot_file_id(file_id: str) -> MessageMediaPhoto | MessageMediaDocument:
    """Turn a file id back into a media object; raises ValueError if unreadable."""
    parts = unpack_bot_file_id(file_id)
    if not (parts.id and parts.access_hash and parts.file_type and parts.dc_id):
        raise ValueError("failed to resolve file id: unrecognized format")

    if parts.file_type == _PHOTO:
        return MessageMediaPhoto(
            photo=Photo(id=parts.id, access_hash=parts.access_hash, dc_id=parts.dc_id)
        )
    if parts.file_type in _DOCUMENT_TYPES:
        return MessageMediaDocument(
            document=Document(
                id=parts.id,
                access_hash=parts.access_hash,
                dc_id=parts.dc_id,
                attributes=_attributes_for(parts.file_type),
            )
        )
    raise ValueError("failed to resolve file id: unknown file type")