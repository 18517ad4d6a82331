"""Describing server settings and caching server records in memory."""

from __future__ import annotations

import threading

from .models import Server

_PREVIEW_BYTES = 25


def _preview(text: str) -> str:
    raw = text.encode("utf-8")
    if len(raw) > _PREVIEW_BYTES:
        return raw[:_PREVIEW_BYTES].decode("utf-8", errors="ignore") + "..."
    return text


def server_sprint(server: Server) -> str:
    """Summarise a server's settings, flagging settings that do not fit together."""
    parts = ["Server: "]
    if server.welcome_message is not None:
        parts.append("{WelcomeMessage: `" + _preview(server.welcome_message) + "`}")
    if server.welcome_channel is not None:
        if server.welcome_message is None:
            parts.append("{!!! MISCONFIG !!!: `welcome channel but no message!`}")
        parts.append("{WelcomeChannel: `" + server.welcome_channel + "`}")
    elif server.welcome_message is not None:
        parts.append("{WelcomeChannel: `Sent via DM`}")
    if server.rule_agreement is not None:
        parts.append("{RuleAgreement: `" + _preview(server.rule_agreement) + "`}")
        if server.base_role is None:
            parts.append("{!!! MISCONFIG !!!: `Rule agreement found but no base role set`}")
    if server.bot_channel is not None:
        parts.append("{BotChannel: `" + server.bot_channel + "`}")
    if server.starter_role is not None:
        parts.append("{StarterRole: `" + server.starter_role + "`}")
    if server.base_role is not None:
        parts.append("{BaseRole: `" + server.base_role + "`}")
    if server.enabled:
        parts.append("{Enabled: `true`}")
    if server.veteran_rank is not None:
        parts.append("{VeteranRank: `" + str(server.veteran_rank) + "`}")
        if server.veteran_role is None:
            parts.append("{!!! MISCONFIG !!!: `veteran rank provided but no role provided!`}")
    if server.veteran_role is not None:
        parts.append("{VeteranRole: `" + server.veteran_role + "`}")
        if server.veteran_rank is None:
            parts.append("{!!! MISCONFIG !!!: `veteran role provided but no rank provided!`}")
    return "".join(parts)


class ServerCache:
    """A thread-safe in-memory cache of servers keyed by guild ID."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._servers: dict[str, Server] = {}

    def get(self, guild_uid: str) -> Server | None:
        """Return the cached server for a guild, or None if it is not cached."""
        with self._lock:
            return self._servers.get(guild_uid)

    def put(self, server: Server) -> None:
        with self._lock:
            self._servers[server.guild_uid] = server

    def flush(self) -> None:
        """Forget every cached server."""
        with self._lock:
            self._servers = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._servers)