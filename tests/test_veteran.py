import pytest

from moebot.veteran import (
    MESSAGE_COOLDOWN,
    MESSAGE_POINTS,
    REACTION_COOLDOWN,
    REACTION_POINTS,
    VETERAN_BUFFER_SIZE_MAX,
    CooldownTracker,
    VeteranBuffer,
    build_key,
    congrats_message,
    split_key,
)


def test_key_round_trip():
    key = build_key("111", "222")
    assert key == "111:222"
    assert split_key(key) == ("111", "222")


def test_split_key_without_separator_raises():
    with pytest.raises(ValueError):
        split_key("nocolon")


def test_congrats_message():
    assert congrats_message("42", "moe") == (
        "Congrats <@42> you can become a server veteran! Type `moe role veteran` In this channel."
    )


def test_cooldown_first_use_is_reached():
    tracker = CooldownTracker(MESSAGE_COOLDOWN)
    assert tracker.is_reached("k", now=100.0) is True


def test_cooldown_blocks_within_window():
    tracker = CooldownTracker(MESSAGE_COOLDOWN)
    tracker.is_reached("k", now=100.0)
    assert tracker.is_reached("k", now=100.0 + MESSAGE_COOLDOWN - 1) is False


def test_cooldown_reached_exactly_at_end():
    tracker = CooldownTracker(REACTION_COOLDOWN)
    tracker.is_reached("k", now=0.0)
    assert tracker.is_reached("k", now=REACTION_COOLDOWN) is True


def test_cooldown_restarts_after_reached():
    tracker = CooldownTracker(MESSAGE_COOLDOWN)
    tracker.is_reached("k", now=0.0)
    tracker.is_reached("k", now=MESSAGE_COOLDOWN)
    assert tracker.is_reached("k", now=MESSAGE_COOLDOWN + 1) is False


def test_blocked_attempt_does_not_restart_cooldown():
    tracker = CooldownTracker(MESSAGE_COOLDOWN)
    tracker.is_reached("k", now=0.0)
    tracker.is_reached("k", now=MESSAGE_COOLDOWN - 1)
    assert tracker.is_reached("k", now=MESSAGE_COOLDOWN) is True


def test_cooldown_keys_are_independent():
    tracker = CooldownTracker(MESSAGE_COOLDOWN)
    tracker.is_reached("a", now=0.0)
    assert tracker.is_reached("b", now=1.0) is True
    assert tracker.is_reached("a", now=1.0) is False


def test_buffer_signals_drain_after_limit():
    buffer = VeteranBuffer()
    results = [buffer.add("u", "g", REACTION_POINTS) for _ in range(VETERAN_BUFFER_SIZE_MAX)]
    assert not any(results)
    assert buffer.add("u", "g", REACTION_POINTS) is True


def test_buffer_accumulates_points_per_key():
    buffer = VeteranBuffer()
    buffer.add("u1", "g", MESSAGE_POINTS)
    buffer.add("u1", "g", REACTION_POINTS)
    buffer.add("u2", "g", MESSAGE_POINTS)
    drained = buffer.drain()
    assert sorted(drained) == sorted(
        [("u1", "g", MESSAGE_POINTS + REACTION_POINTS), ("u2", "g", MESSAGE_POINTS)]
    )


def test_drain_empties_and_resets_limit():
    buffer = VeteranBuffer(max_size=2)
    for _ in range(3):
        buffer.add("u", "g", 1)
    buffer.drain()
    assert len(buffer) == 0
    assert buffer.drain() == []
    assert buffer.add("u", "g", 1) is False
    assert buffer.add("u", "g", 1) is False
    assert buffer.add("u", "g", 1) is True