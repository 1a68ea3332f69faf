# tgkit

Building blocks for writing Telegram clients and bots in Python. It uses only
the standard library.

## Modules

- `tgkit.types`: plain data classes for peers, messages, media, documents,
  photos, users, channels and channel participants. `Document.attribute(kind)`
  returns the first attribute of a given class.
- `tgkit.message`: `NewMessage` and `Album`. `NewMessage` answers questions
  about a received message: its chat and sender ids, chat type
  (`EntityType`), whether it is a reply, forward or command, its command text
  and arguments, and which kind of media it carries (`photo()`, `video()`,
  `sticker()`, `media_type()` and so on). `Album.ids()` lists the ids of an
  album's messages.
- `tgkit.participant`: `ParticipantUpdate` sorts a change between two
  participant states into added, joined, left, banned, kicked, promoted or
  demoted.
- `tgkit.fileid`: `pack_bot_file_id`, `unpack_bot_file_id` (returns an
  `UnpackedFileId`) and `resolve_bot_file_id`, which raises `ValueError` for an
  id it cannot read.
- `tgkit.mime`: `MimeTypeManager` maps extensions to MIME types, and for
  unknown extensions sniffs the first bytes of the file; for a URL it asks the
  server for its `Content-Type`. A shared instance is `tgkit.mime.mime_types`.
  `is_url` and `is_phone` are simple checks.
- `tgkit.errors`: `get_error_code`, `get_flood_wait`, `match_error` and
  `is_flood_error` read details out of an error's text.
- `tgkit.patterns`: `match_message_pattern`, `match_edit_pattern`,
  `match_inline_pattern`, `match_callback_pattern` and
  `match_inline_callback_pattern` decide whether text or callback data matches
  a handler pattern (a string, a compiled regular expression, or a catch-all
  such as `ON_NEW_MESSAGE`). Message patterns of the form `cmd:<name>` match
  `/name` and `!name` commands.
- `tgkit.filters`: `Filter`, the ready-made `FILTER_*` instances,
  `filter_users`, `filter_chats`, `filter_func` and `run_filter_chain`.
- `tgkit.streams`: `Source` reads from a path, bytes, a `BytesIO` or any
  readable; `Destination` accepts writes at any offset, in memory or into a
  file.
- `tgkit.progress`: `ProgressManager` renders percentage, ETA, speed and a
  text bar; `format_duration` formats seconds as `1h2m3s`.

## Installing

```
pip install .
```

## Examples

Bot file ids:

```python
from tgkit.types import Document, DocumentAttributeVideo
from tgkit.fileid import pack_bot_file_id, unpack_bot_file_id

doc = Document(id=1234, access_hash=5678, dc_id=2,
               attributes=[DocumentAttributeVideo()])
file_id = pack_bot_file_id(doc)
print(unpack_bot_file_id(file_id))
# UnpackedFileId(id=1234, access_hash=5678, file_type=4, dc_id=2)
```

Matching and filtering a message:

```python
from tgkit.types import Message, PeerUser
from tgkit.message import NewMessage
from tgkit.patterns import match_message_pattern
from tgkit.filters import FILTER_PRIVATE, run_filter_chain

msg = NewMessage(Message(id=7, message="/ping now", peer_id=PeerUser(42)))
match_message_pattern("cmd:ping", msg.text(), None)   # True
run_filter_chain(msg, [FILTER_PRIVATE])                # True
msg.args()                                             # "now"
```

Flood waits:

```python
from tgkit.errors import get_flood_wait

get_flood_wait("FLOOD_WAIT_30")  # 30
```

Writing chunks out of order:

```python
from tgkit.streams import Destination

with Destination() as dest:
    dest.write_at(b"world", 5)
    dest.write_at(b"hello", 0)
    dest.getvalue()  # b"helloworld"
```

## What it does not do

The package does not connect to Telegram. It has no client, no network
protocol, no registry or dispatcher that calls handlers for incoming updates,
and no upload or download loop; `Source`, `Destination` and `ProgressManager`
are the pieces such a loop would use. Deciding when to call a handler is left
to the caller, with `tgkit.patterns` and `tgkit.filters` to answer whether it
should be called.

## Tests

```
pip install .[test]
pytest
```