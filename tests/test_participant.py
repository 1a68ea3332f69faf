import pytest

from tgkit.participant import ParticipantUpdate
from tgkit.types import (
    Channel,
    ChannelParticipant,
    ChannelParticipantAdmin,
    ChannelParticipantBanned,
    ChannelParticipantLeft,
    User,
)

MEMBER = ChannelParticipant()
BANNED = ChannelParticipantBanned()
LEFT = ChannelParticipantLeft()
ADMIN = ChannelParticipantAdmin()


def test_ids():
    update = ParticipantUpdate(channel=Channel(id=100), user=User(id=200), actor=User(id=300))
    assert (update.channel_id(), update.user_id(), update.actor_id()) == (100, 200, 300)
    empty = ParticipantUpdate()
    assert (empty.channel_id(), empty.user_id(), empty.actor_id()) == (0, 0, 0)


@pytest.mark.parametrize("old", [BANNED, LEFT])
def test_added_and_joined(old):
    update = ParticipantUpdate(old=old, new=MEMBER)
    assert update.is_added()
    assert update.is_joined()
    assert not update.is_promoted() or old is BANNED


def test_left():
    assert ParticipantUpdate(old=MEMBER, new=None).is_left()
    assert not ParticipantUpdate(old=MEMBER, new=MEMBER).is_left()


def test_banned_and_kicked():
    assert ParticipantUpdate(old=MEMBER, new=BANNED).is_banned()
    assert ParticipantUpdate(old=MEMBER, new=LEFT).is_kicked()
    assert not ParticipantUpdate(old=LEFT, new=BANNED).is_banned()


def test_promoted():
    assert ParticipantUpdate(old=MEMBER, new=ADMIN).is_promoted()
    assert ParticipantUpdate(old=BANNED, new=ADMIN).is_promoted()
    assert not ParticipantUpdate(old=LEFT, new=ADMIN).is_promoted()


def test_demoted():
    assert ParticipantUpdate(old=ADMIN, new=MEMBER).is_demoted()
    assert ParticipantUpdate(old=ADMIN, new=BANNED).is_demoted()
    assert not ParticipantUpdate(old=ADMIN, new=LEFT).is_demoted()


def test_missing_states_report_nothing():
    update = ParticipantUpdate(old=None, new=MEMBER)
    checks = [
        update.is_added(),
        update.is_joined(),
        update.is_banned(),
        update.is_kicked(),
        update.is_promoted(),
        update.is_demoted(),
    ]
    assert checks == [False] * 6