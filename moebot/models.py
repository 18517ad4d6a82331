"""Records stored by the bot: servers, roles, channels, polls and the like."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from .timer import TimerMark

ROLE_CODE_SEARCH_TEXT = "[code]"
ROLE_CODE_LENGTH = 6
OPTIONS_FOR_GROUP_TYPE = "ANY, EXC, ENR, NOM"


class Permission(IntEnum):
    """Permission levels; a higher value grants more."""

    ALL = 2
    MOD = 50
    GUILD_OWNER = 90
    NONE = 100
    MASTER = 101


class GroupType(IntEnum):
    """How roles in a role group relate to each other."""

    ANY = 1
    EXCLUSIVE = 2
    EXCLUSIVE_NO_REMOVE = 3
    NO_MULTIPLES = 4


@dataclass
class Channel:
    id: int = 0
    server_id: int = 0
    channel_uid: str = ""
    bot_allowed: bool = True
    move_pins: bool = False
    move_text_pins: bool = False
    delete_pin: bool = False
    move_channel_uid: str | None = None


@dataclass
class RoleGroup:
    id: int = 0
    server_id: int = 0
    name: str = ""
    type: int = 0


@dataclass
class Role:
    id: int = 0
    server_id: int = 0
    groups: list[int] = field(default_factory=list)
    role_uid: str = ""
    permission: int = 0
    confirmation_message: str | None = None
    confirmation_security_answer: str | None = None
    trigger: str | None = None


@dataclass
class Server:
    """A guild and its bot settings; optional settings are None when unset."""

    id: int = 0
    guild_uid: str = ""
    welcome_message: str | None = None
    rule_agreement: str | None = None
    veteran_rank: int | None = None
    veteran_role: str | None = None
    bot_channel: str | None = None
    enabled: bool = True
    welcome_channel: str | None = None
    starter_role: str | None = None
    base_role: str | None = None


@dataclass
class UserProfile:
    id: int = 0
    user_uid: str = ""


@dataclass
class UserServerRank:
    id: int = 0
    server_id: int = 0
    user_id: int = 0
    rank: int = 0
    message_sent: bool = False


@dataclass
class UserServerRankWrapper:
    user_uid: str = ""
    server_uid: str = ""
    rank: int = 0
    send_to: str = ""


@dataclass
class PollOption:
    id: int = 0
    poll_id: int = 0
    reaction_id: str = ""
    reaction_name: str = ""
    description: str = ""
    votes: int = 0


@dataclass
class Poll:
    id: int = 0
    options: list[PollOption] = field(default_factory=list)
    title: str = ""
    open: bool = True
    channel_id: int = 0
    user_uid: str = ""
    message_uid: str = ""


@dataclass
class RaffleEntry:
    id: int = 0
    guild_uid: str = ""
    user_uid: str = ""
    raffle_type: int = 0
    ticket_count: int = 0
    raffle_data: str = ""
    last_ticket_update: int = 0


@dataclass
class ScheduledOperation:
    id: int = 0
    server_id: int = 0
    type: int = 0
    planned_execution_time: datetime | None = None


@dataclass
class ChannelRotation(ScheduledOperation):
    channel_uid_list: list[str] = field(default_factory=list)
    current_channel_uid: str = ""


@dataclass
class MetricTimer:
    """Timer events recorded for one user, stored as JSON."""

    events: list[TimerMark] = field(default_factory=list)
    user_id: int = 0

    def to_json(self) -> str:
        payload = {
            "events": [event.to_dict() for event in self.events],
            "userId": self.user_id,
        }
        return json.dumps(payload, separators=(",", ":"))