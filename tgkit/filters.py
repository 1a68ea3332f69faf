"""Filters that decide whether a message handler sees a message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from tgkit.message import NewMessage


@dataclass(frozen=True)
class Filter:
    """Conditions a message must meet; users and chats form an allow or block list."""

    private: bool = False
    group: bool = False
    channel: bool = False
    media: bool = False
    command: bool = False
    reply: bool = False
    forward: bool = False
    from_bot: bool = False
    blacklist: bool = False
    mention: bool = False
    users: tuple = ()
    chats: tuple = ()
    func: Optional[Callable[[NewMessage], bool]] = None


FILTER_PRIVATE = Filter(private=True)
FILTER_GROUP = Filter(group=True)
FILTER_CHANNEL = Filter(channel=True)
FILTER_MEDIA = Filter(media=True)
FILTER_COMMAND = Filter(command=True)
FILTER_REPLY = Filter(reply=True)
FILTER_FORWARD = Filter(forward=True)
FILTER_FROM_BOT = Filter(from_bot=True)
FILTER_BLACKLIST = Filter(blacklist=True)
FILTER_MENTION = Filter(mention=True)


def filter_users(*args: int) -> Filter:
    """A filter listing user ids."""
    return Filter(users=tuple(args))


def filter_chats(*args: int) -> Filter:
    """A filter listing chat ids."""
    return Filter(chats=tuple(args))


def filter_func(func: Callable[[NewMessage], bool]) -> Filter:
    """A filter that calls ``func`` on the message."""
    return Filter(func=func)


def _fails(message: NewMessage, f: Filter) -> bool:
    if (
        (f.private and not message.is_private())
        or (f.group and not message.is_group())
        or (f.channel and not message.is_channel())
    ):
        return True
    if (
        (f.media and not message.is_media())
        or (f.command and not message.is_command())
        or (f.reply and not message.is_reply())
        or (f.forward and not message.is_forward())
    ):
        return True
    if f.from_bot and (message.sender is None or not message.sender.bot):
        return True
    if f.mention and message.message is not None and not message.message.mentioned:
        return True
    if f.func is not None and not f.func(message):
        return True
    return False


def run_filter_chain(message: NewMessage, filters: Iterable[Filter]) -> bool:
    """True if the message passes every filter and the user/chat lists."""
    blacklist = False
    users: tuple = ()
    chats: tuple = ()

    for f in filters:
        if _fails(message, f):
            return False
        if f.users:
            users = f.users
        if f.chats:
            chats = f.chats
        if f.blacklist:
            blacklist = True

    listed = False
    if message.sender_id() in users:
        if blacklist:
            return False
        listed = True
    if message.chat_id() in chats:
        if blacklist:
            return False
        listed = True

    if not blacklist and (users or chats) and not listed:
        return False
    return True