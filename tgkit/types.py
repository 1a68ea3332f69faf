"""Plain data objects for peers, media, messages and participants."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar, Union

_T = TypeVar("_T")


class EntityType(str, enum.Enum):
    """The kind of chat a message belongs to."""

    USER = "user"
    CHAT = "chat"
    CHANNEL = "channel"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------- peers


@dataclass
class PeerUser:
    user_id: int = 0


@dataclass
class PeerChat:
    chat_id: int = 0


@dataclass
class PeerChannel:
    channel_id: int = 0


Peer = Union[PeerUser, PeerChat, PeerChannel]


# ---------------------------------------------------- document attributes


@dataclass
class DocumentAttributeFilename:
    file_name: str = ""


@dataclass
class DocumentAttributeAudio:
    title: str = ""
    performer: str = ""
    duration: int = 0
    voice: bool = False


@dataclass
class DocumentAttributeVideo:
    duration: float = 0.0
    w: int = 0
    h: int = 0
    round_message: bool = False


@dataclass
class DocumentAttributeSticker:
    alt: str = ""


@dataclass
class DocumentAttributeAnimated:
    pass


DocumentAttribute = Union[
    DocumentAttributeFilename,
    DocumentAttributeAudio,
    DocumentAttributeVideo,
    DocumentAttributeSticker,
    DocumentAttributeAnimated,
]


@dataclass
class Document:
    id: int = 0
    access_hash: int = 0
    file_reference: bytes = b""
    dc_id: int = 0
    size: int = 0
    mime_type: str = ""
    attributes: list = field(default_factory=list)

    def attribute(self, kind: type[_T]) -> Optional[_T]:
        """Return the first attribute that is an instance of ``kind``, or None."""
        return next((a for a in self.attributes if isinstance(a, kind)), None)


# --------------------------------------------------------------- photos


@dataclass
class PhotoSize:
    type: str = ""
    w: int = 0
    h: int = 0
    size: int = 0


@dataclass
class PhotoStrippedSize:
    type: str = ""
    bytes: bytes = b""


@dataclass
class PhotoCachedSize:
    type: str = ""
    w: int = 0
    h: int = 0
    bytes: bytes = b""


@dataclass
class PhotoSizeEmpty:
    type: str = ""


@dataclass
class PhotoSizeProgressive:
    type: str = ""
    w: int = 0
    h: int = 0
    sizes: list = field(default_factory=list)


AnyPhotoSize = Union[
    PhotoSize, PhotoStrippedSize, PhotoCachedSize, PhotoSizeEmpty, PhotoSizeProgressive
]


@dataclass
class Photo:
    id: int = 0
    access_hash: int = 0
    file_reference: bytes = b""
    dc_id: int = 0
    sizes: list = field(default_factory=list)


@dataclass
class WebPage:
    id: int = 0
    url: str = ""
    photo: Optional[Photo] = None
    document: Optional[Document] = None


@dataclass
class GeoPoint:
    lat: float = 0.0
    long: float = 0.0
    access_hash: int = 0


# ---------------------------------------------------------- message media


@dataclass
class MessageMediaPhoto:
    photo: Optional[Photo] = None
    spoiler: bool = False
    ttl_seconds: int = 0


@dataclass
class MessageMediaDocument:
    document: Optional[Document] = None
    spoiler: bool = False
    ttl_seconds: int = 0


@dataclass
class MessageMediaContact:
    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    vcard: str = ""
    user_id: int = 0


@dataclass
class MessageMediaGeo:
    geo: Optional[GeoPoint] = None


@dataclass
class MessageMediaGeoLive:
    geo: Optional[GeoPoint] = None
    period: int = 0


@dataclass
class MessageMediaVenue:
    geo: Optional[GeoPoint] = None
    title: str = ""
    address: str = ""


@dataclass
class MessageMediaGame:
    game: Any = None


@dataclass
class MessageMediaInvoice:
    title: str = ""
    description: str = ""
    currency: str = ""
    total_amount: int = 0


@dataclass
class MessageMediaUnsupported:
    pass


@dataclass
class MessageMediaWebPage:
    webpage: Optional[WebPage] = None


@dataclass
class MessageMediaDice:
    value: int = 0
    emoticon: str = ""


@dataclass
class MessageMediaPoll:
    poll: Any = None
    results: Any = None


MessageMedia = Union[
    MessageMediaPhoto,
    MessageMediaDocument,
    MessageMediaContact,
    MessageMediaGeo,
    MessageMediaGeoLive,
    MessageMediaVenue,
    MessageMediaGame,
    MessageMediaInvoice,
    MessageMediaUnsupported,
    MessageMediaWebPage,
    MessageMediaDice,
    MessageMediaPoll,
]


# ------------------------------------------------------- file locations


@dataclass
class InputDocumentFileLocation:
    id: int = 0
    access_hash: int = 0
    file_reference: bytes = b""
    thumb_size: str = ""


@dataclass
class InputPhotoFileLocation:
    id: int = 0
    access_hash: int = 0
    file_reference: bytes = b""
    thumb_size: str = ""


@dataclass
class InputPeerPhotoFileLocation:
    peer: Any = None
    photo_id: int = 0
    big: bool = False


# ------------------------------------------------------------- messages


@dataclass
class MessageEntityBotCommand:
    offset: int = 0
    length: int = 0


@dataclass
class MessageReplyHeader:
    reply_to_msg_id: int = 0
    reply_to_peer_id: Optional[Peer] = None


@dataclass
class Message:
    id: int = 0
    message: str = ""
    peer_id: Optional[Peer] = None
    from_id: Optional[Peer] = None
    date: int = 0
    entities: list = field(default_factory=list)
    media: Optional[Any] = None
    reply_to: Optional[MessageReplyHeader] = None
    fwd_from: Any = None
    reply_markup: Any = None
    grouped_id: int = 0
    mentioned: bool = False
    out: bool = False
    silent: bool = False
    media_unread: bool = False
    via_bot_id: int = 0
    ttl_period: int = 0


@dataclass
class MessageActionChatEditPhoto:
    photo: Optional[Photo] = None


@dataclass
class MessageService:
    id: int = 0
    peer_id: Optional[Peer] = None
    from_id: Optional[Peer] = None
    date: int = 0
    action: Any = None
    reply_to: Optional[MessageReplyHeader] = None


# ---------------------------------------------------------- users, chats


@dataclass
class User:
    id: int = 0
    access_hash: int = 0
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    bot: bool = False


@dataclass
class Channel:
    id: int = 0
    access_hash: int = 0
    title: str = ""
    username: str = ""
    broadcast: bool = False
    megagroup: bool = False


@dataclass
class CustomFile:
    ext: str = ""
    file_id: str = ""
    name: str = ""
    size: int = 0


@dataclass
class DeleteMessage:
    channel_id: int = 0
    messages: list = field(default_factory=list)


# ---------------------------------------------------------- participants


@dataclass
class ChannelParticipant:
    user_id: int = 0
    date: int = 0


@dataclass
class ChannelParticipantBanned:
    peer: Optional[Peer] = None
    kicked_by: int = 0
    date: int = 0
    left: bool = False


@dataclass
class ChannelParticipantLeft:
    peer: Optional[Peer] = None


@dataclass
class ChannelParticipantAdmin:
    user_id: int = 0
    promoted_by: int = 0
    date: int = 0
    rank: str = ""