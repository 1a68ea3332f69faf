import pytest

from tgkit.message import Album, NewMessage
from tgkit.types import (
    Channel,
    Document,
    DocumentAttributeAudio,
    DocumentAttributeFilename,
    DocumentAttributeVideo,
    EntityType,
    GeoPoint,
    Message,
    MessageEntityBotCommand,
    MessageMediaContact,
    MessageMediaDocument,
    MessageMediaGeo,
    MessageMediaPhoto,
    MessageMediaPoll,
    MessageReplyHeader,
    PeerChannel,
    PeerChat,
    PeerUser,
    Photo,
)


def make(**kwargs):
    channel = kwargs.pop("channel", None)
    return NewMessage(message=Message(**kwargs), channel=channel)


def test_id_taken_from_message():
    assert make(id=42).id == 42


def test_chat_id_for_each_peer():
    assert make(peer_id=PeerUser(user_id=7)).chat_id() == 7
    assert make(peer_id=PeerChat(chat_id=8)).chat_id() == 8
    assert make(peer_id=PeerChannel(channel_id=9)).chat_id() == 9
    assert make().chat_id() == 0


def test_chat_types():
    assert make(peer_id=PeerUser(user_id=1)).chat_type() is EntityType.USER
    assert make(peer_id=PeerChat(chat_id=1)).is_group()
    broadcast = make(peer_id=PeerChannel(channel_id=1), channel=Channel(broadcast=True))
    assert broadcast.is_channel()
    megagroup = make(peer_id=PeerChannel(channel_id=1), channel=Channel(megagroup=True))
    assert megagroup.is_group()
    assert make(peer_id=PeerChannel(channel_id=1)).is_channel()
    assert make().chat_type() is EntityType.UNKNOWN


def test_sender_id():
    private = make(peer_id=PeerUser(user_id=5), from_id=PeerUser(user_id=6))
    assert private.sender_id() == 5
    group = make(peer_id=PeerChat(chat_id=5), from_id=PeerUser(user_id=6))
    assert group.sender_id() == 6
    assert make(peer_id=PeerChat(chat_id=5)).sender_id() == 0


def test_reply_and_forward():
    msg = make(reply_to=MessageReplyHeader(reply_to_msg_id=31), fwd_from={"from": 1})
    assert msg.is_reply()
    assert msg.reply_to_msg_id() == 31
    assert msg.is_forward()
    plain = make()
    assert not plain.is_reply() and plain.reply_to_msg_id() == 0


def test_args():
    assert make(message="/ban   user reason ").args() == "user reason"
    assert make(message="/start").args() == ""


def test_commands():
    msg = make(message="/start now", entities=[MessageEntityBotCommand(offset=0, length=6)])
    assert msg.is_command()
    assert msg.get_command() == "/start"
    assert make(message="hello").get_command() == ""
    assert not make(message="hello").is_command()


def test_media_type():
    assert make().media_type() == ""
    assert make(media=MessageMediaPhoto(photo=Photo())).media_type() == "photo"
    assert make(media=MessageMediaDocument()).media_type() == "document"
    assert make(media=MessageMediaPoll()).media_type() == "unknown"


def test_document_accessors():
    video = Document(attributes=[DocumentAttributeVideo()])
    msg = make(media=MessageMediaDocument(document=video))
    assert msg.video() is video
    assert msg.document() is video
    assert msg.audio() is None
    assert msg.sticker() is None


def test_sticker_by_file_name():
    doc = Document(attributes=[DocumentAttributeFilename(file_name="anim.tgs")])
    assert make(media=MessageMediaDocument(document=doc)).sticker() is doc


def test_voice_matches_audio():
    doc = Document(attributes=[DocumentAttributeAudio(voice=True)])
    msg = make(media=MessageMediaDocument(document=doc))
    assert msg.voice() is doc and msg.audio() is doc


def test_other_media_accessors():
    geo = GeoPoint(lat=1.5, long=2.5)
    assert make(media=MessageMediaGeo(geo=geo)).geo() is geo
    contact = MessageMediaContact(first_name="Ann")
    msg = make(media=contact)
    assert msg.contact() is contact
    assert msg.photo() is None
    assert msg.poll() is None


def test_album():
    first = make(id=1, reply_to=MessageReplyHeader(reply_to_msg_id=3))
    second = make(id=2)
    album = Album(grouped_id=10, messages=[first, second])
    assert album.ids() == [1, 2]
    assert album.is_reply()
    assert not album.is_forward()


def test_empty_album():
    with pytest.raises(ValueError):
        Album().is_reply()