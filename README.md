# moebot

Building blocks for a community chat bot, written without any chat service's
client library. Each module is plain Python that you call from your own bot
code.

## Modules

- `moebot.textutil`: message formatting (`make_bold`, `make_italic`,
  `make_strikethrough`, `make_code`, `user_id_to_mention`), `extract_channel_id`
  for channel mentions such as `<#1234567>`, `normalize_newlines`,
  `make_alpha_only`, `force_title_case`, `parse_interval_to_iso` for intervals
  such as `1Y2M3W4D5h6m`, and the list helpers `str_contains`,
  `str_contains_prefix` and `subtract`.
- `moebot.timer`: `start_timer` and `Timer`, a stopwatch made of named
  `TimerMark`s. `Timer.stop()` returns each mark's duration in nanoseconds,
  plus a `_total`.
- `moebot.models`: dataclasses for the records the bot keeps (`Server`,
  `Channel`, `Role`, `RoleGroup`, `UserProfile`, `UserServerRank`,
  `UserServerRankWrapper`, `Poll`, `PollOption`, `RaffleEntry`,
  `ScheduledOperation`, `ChannelRotation`, `MetricTimer`) and the `Permission`
  and `GroupType` enums. `MetricTimer.to_json()` serialises timer events.
- `moebot.permissions`: `PermissionChecker` and helpers to read a permission
  level from user input (`get_permission_from_string`) and describe it
  (`sprint_permission`, `get_permission_string`, `is_assignable_permission_level`,
  `assignable_roles`, `is_guild_owner`).
- `moebot.groups`: `group_type_from_string` and `group_type_description` for
  role-group types.
- `moebot.servers`: `server_sprint`, a one-line summary of a server's settings
  that flags settings that do not fit together, and `ServerCache`, a
  thread-safe in-memory cache keyed by guild ID.
- `moebot.veteran`: activity points. `CooldownTracker` lets a key count only
  once per cooldown; `VeteranBuffer` collects points per user and guild and
  signals when it should be drained. `congrats_message` builds the message
  sent to a user who may take the veteran role.
- `moebot.database`: `create_conn_string` for the database server's key/value
  connection string.
- `moebot.gifmaker`: `make_gif`, a two-frame GIF that shows "Hover to view"
  first and then the given text, wrapped to fit.
- `moebot.channel_timer`: `ChannelTimers` for per-channel timers,
  `fmt_duration` for `hh:mm:ss`, and `sync_delay`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from moebot.textutil import parse_interval_to_iso, user_id_to_mention, make_bold
from moebot.channel_timer import fmt_duration

parse_interval_to_iso("1Y2M3W4D5h6m")   # "P1Y2M3W4DT5H6M"
user_id_to_mention("1234")              # "<@1234>"
make_bold("hello")                      # "**hello**"
fmt_duration(3661)                      # "01:01:01"
```

Checking permissions, with role levels supplied by your own lookup:

```python
from moebot.models import Permission
from moebot.permissions import PermissionChecker

checker = PermissionChecker(
    master_id="1",
    role_permissions=lambda roles: [Permission.MOD] if "mods" in roles else [],
)
checker.has_mod_perm("42", ["mods"], "7")   # True
checker.has_mod_perm("42", [], "7")         # False
checker.has_mod_perm("7", [], "7")          # True: guild owner
```

Counting veteran points:

```python
from moebot.veteran import CooldownTracker, VeteranBuffer, MESSAGE_POINTS

cooldown = CooldownTracker(30.0)
buffer = VeteranBuffer()

if cooldown.is_reached("user:guild", now=0.0):
    if buffer.add("user", "guild", MESSAGE_POINTS):
        for user_uid, guild_uid, points in buffer.drain():
            ...   # store the points
```

Timing the stages of a piece of work:

```python
from moebot.timer import start_timer

timer = start_timer("")
timer.add_mark("loading")
# ... work ...
durations = timer.stop()   # mark name -> nanoseconds, including "_total"
```

Making a spoiler GIF:

```python
from moebot.gifmaker import make_gif

data = make_gif("The butler did it.")
with open("spoiler.gif", "wb") as fh:
    fh.write(data)
```

## What this package does not do

- It does not connect to a chat service, listen for events or send messages;
  your bot does that and calls these functions.
- It does not store anything in a database. The records in `moebot.models`
  are plain dataclasses, `moebot.database` only builds a connection string,
  and `PermissionChecker` takes the role levels from a function you supply.
- It has no rules for adding or removing roles (confirmation codes, exclusive
  groups and the like) and no lookups over a chat service's roles, reactions
  or channel permission overwrites.
- It has no command-line program.