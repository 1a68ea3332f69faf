"""Changes to a member's status in a channel or supergroup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from tgkit.types import (
    Channel,
    ChannelParticipant,
    ChannelParticipantAdmin,
    ChannelParticipantBanned,
    ChannelParticipantLeft,
    User,
)


@dataclass
class ParticipantUpdate:
    """A participant's old and new state, with the users involved."""

    channel: Optional[Channel] = None
    user: Optional[User] = None
    actor: Optional[User] = None
    old: Any = None
    new: Any = None
    invite: Any = None
    date: int = 0
    original_update: Any = None

    def channel_id(self) -> int:
        return self.channel.id if self.channel is not None else 0

    def user_id(self) -> int:
        return self.user.id if self.user is not None else 0

    def actor_id(self) -> int:
        return self.actor.id if self.actor is not None else 0

    def _changed(self, old_kinds: tuple, new_kinds: tuple) -> bool:
        if self.old is None or self.new is None:
            return False
        return isinstance(self.old, old_kinds) and isinstance(self.new, new_kinds)

    def is_added(self) -> bool:
        """A banned or departed user became a member."""
        return self._changed(
            (ChannelParticipantBanned, ChannelParticipantLeft), (ChannelParticipant,)
        )

    def is_left(self) -> bool:
        return self.new is None

    def is_joined(self) -> bool:
        """A departed or banned user became a member."""
        return self._changed(
            (ChannelParticipantLeft, ChannelParticipantBanned), (ChannelParticipant,)
        )

    def is_banned(self) -> bool:
        return self._changed((ChannelParticipant,), (ChannelParticipantBanned,))

    def is_kicked(self) -> bool:
        return self._changed((ChannelParticipant,), (ChannelParticipantLeft,))

    def is_promoted(self) -> bool:
        return self._changed(
            (ChannelParticipant, ChannelParticipantBanned), (ChannelParticipantAdmin,)
        )

    def is_demoted(self) -> bool:
        return self._changed(
            (ChannelParticipantAdmin,), (ChannelParticipant, ChannelParticipantBanned)
        )