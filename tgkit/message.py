"""Incoming message wrapper and media albums."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tgkit.types import (
    Channel,
    CustomFile,
    Document,
    DocumentAttributeAnimated,
    DocumentAttributeAudio,
    DocumentAttributeFilename,
    DocumentAttributeSticker,
    DocumentAttributeVideo,
    EntityType,
    GeoPoint,
    Message,
    MessageEntityBotCommand,
    MessageMediaContact,
    MessageMediaDice,
    MessageMediaDocument,
    MessageMediaGame,
    MessageMediaGeo,
    MessageMediaGeoLive,
    MessageMediaInvoice,
    MessageMediaPhoto,
    MessageMediaPoll,
    MessageMediaUnsupported,
    MessageMediaVenue,
    MessageMediaWebPage,
    PeerChannel,
    PeerChat,
    PeerUser,
    Photo,
    User,
    WebPage,
)

_MEDIA_TYPES = (
    (MessageMediaPhoto, "photo"),
    (MessageMediaDocument, "document"),
    (MessageMediaVenue, "venue"),
    (MessageMediaContact, "contact"),
    (MessageMediaGeo, "geo"),
    (MessageMediaGame, "game"),
    (MessageMediaInvoice, "invoice"),
    (MessageMediaGeoLive, "geo_live"),
    (MessageMediaUnsupported, "unsupported"),
    (MessageMediaWebPage, "web_page"),
    (MessageMediaDice, "dice"),
)


def _peer_id(peer: Any) -> int:
    if isinstance(peer, PeerUser):
        return peer.user_id
    if isinstance(peer, PeerChat):
        return peer.chat_id
    if isinstance(peer, PeerChannel):
        return peer.channel_id
    return 0


@dataclass
class NewMessage:
    """A received message together with the peers it was packed with."""

    message: Message = field(default_factory=Message)
    id: int = 0
    channel: Optional[Channel] = None
    chat: Any = None
    sender: Optional[User] = None
    sender_chat: Optional[Channel] = None
    peer: Any = None
    file: Optional[CustomFile] = None
    action: Any = None
    original_update: Any = None

    def __post_init__(self) -> None:
        if not self.id:
            self.id = self.message.id
        if self.original_update is None:
            self.original_update = self.message

    def text(self) -> str:
        """The message text."""
        return self.message.message

    def chat_id(self) -> int:
        """The id of the user, chat or channel the message was sent in."""
        return _peer_id(self.message.peer_id)

    def sender_id(self) -> int:
        """The id of the sender; in private chats, the chat id."""
        if self.is_private():
            return self.chat_id()
        return _peer_id(self.message.from_id)

    def chat_type(self) -> EntityType:
        """Whether the message belongs to a user, a group chat or a channel."""
        peer = self.message.peer_id
        if isinstance(peer, PeerUser):
            return EntityType.USER
        if isinstance(peer, PeerChat):
            return EntityType.CHAT
        if isinstance(peer, PeerChannel):
            if self.channel is not None and not self.channel.broadcast:
                return EntityType.CHAT
            return EntityType.CHANNEL
        return EntityType.UNKNOWN

    def is_private(self) -> bool:
        return self.chat_type() is EntityType.USER

    def is_group(self) -> bool:
        return self.chat_type() is EntityType.CHAT

    def is_channel(self) -> bool:
        return self.chat_type() is EntityType.CHANNEL

    def is_reply(self) -> bool:
        return self.message.reply_to is not None

    def is_forward(self) -> bool:
        return self.message.fwd_from is not None

    def reply_to_msg_id(self) -> int:
        """The id of the message replied to, or 0."""
        reply = self.message.reply_to
        return reply.reply_to_msg_id if reply is not None else 0

    def media(self) -> Any:
        """The attached media object, or None."""
        return self.message.media

    def is_media(self) -> bool:
        return self.media() is not None

    def media_type(self) -> str:
        """A short name for the kind of attached media, '' if there is none."""
        media = self.media()
        if media is None:
            return ""
        return next((name for kind, name in _MEDIA_TYPES if isinstance(media, kind)), "unknown")

    def args(self) -> str:
        """Everything after the first space-separated word, trimmed."""
        words = self.text().split(" ")
        if len(words) < 2:
            return ""
        return " ".join(words[1:]).strip()

    def is_command(self) -> bool:
        return any(isinstance(e, MessageEntityBotCommand) for e in self.message.entities)

    def get_command(self) -> str:
        """The text of the first bot-command entity, or ''."""
        text = self.text()
        for entity in self.message.entities:
            if isinstance(entity, MessageEntityBotCommand) and text:
                return text[entity.offset:entity.offset + entity.length]
        return ""

    def _document(self) -> Optional[Document]:
        media = self.media()
        if isinstance(media, MessageMediaDocument) and isinstance(media.document, Document):
            return media.document
        return None

    def _document_with(self, kind: type) -> Optional[Document]:
        document = self._document()
        if document is not None and document.attribute(kind) is not None:
            return document
        return None

    def sticker(self) -> Optional[Document]:
        """The document if it is a sticker (by attribute or .tgs/.webp name)."""
        document = self._document()
        if document is None:
            return None
        for attr in document.attributes:
            if isinstance(attr, DocumentAttributeSticker):
                return document
            if isinstance(attr, DocumentAttributeFilename) and attr.file_name.endswith(
                (".tgs", ".webp")
            ):
                return document
        return None

    def photo(self) -> Optional[Photo]:
        media = self.media()
        if isinstance(media, MessageMediaPhoto) and isinstance(media.photo, Photo):
            return media.photo
        return None

    def document(self) -> Optional[Document]:
        return self._document()

    def video(self) -> Optional[Document]:
        return self._document_with(DocumentAttributeVideo)

    def audio(self) -> Optional[Document]:
        return self._document_with(DocumentAttributeAudio)

    def voice(self) -> Optional[Document]:
        return self._document_with(DocumentAttributeAudio)

    def animation(self) -> Optional[Document]:
        return self._document_with(DocumentAttributeAnimated)

    def geo(self) -> Optional[GeoPoint]:
        media = self.media()
        if isinstance(media, MessageMediaGeo) and isinstance(media.geo, GeoPoint):
            return media.geo
        return None

    def contact(self) -> Optional[MessageMediaContact]:
        media = self.media()
        return media if isinstance(media, MessageMediaContact) else None

    def game(self) -> Optional[MessageMediaGame]:
        media = self.media()
        return media if isinstance(media, MessageMediaGame) else None

    def invoice(self) -> Optional[MessageMediaInvoice]:
        media = self.media()
        return media if isinstance(media, MessageMediaInvoice) else None

    def web_page(self) -> Optional[WebPage]:
        media = self.media()
        if isinstance(media, MessageMediaWebPage) and isinstance(media.webpage, WebPage):
            return media.webpage
        return None

    def poll(self) -> Optional[MessageMediaPoll]:
        media = self.media()
        return media if isinstance(media, MessageMediaPoll) else None

    def venue(self) -> Optional[MessageMediaVenue]:
        media = self.media()
        return media if isinstance(media, MessageMediaVenue) else None


@dataclass
class Album:
    """Messages that share one media group id."""

    grouped_id: int = 0
    messages: list = field(default_factory=list)

    def _first(self) -> NewMessage:
        if not self.messages:
            raise ValueError("album is empty")
        return self.messages[0]

    def is_reply(self) -> bool:
        return self._first().is_reply()

    def is_forward(self) -> bool:
        return self._first().is_forward()

    def ids(self) -> list[int]:
        """The ids of the album's messages, in order."""
        return [m.id for m in self.messages]