# burbir

The core of BurBir, a small console micro-blogging application. The package
holds the app's building blocks. These are tweets (*kicauan*) and the table that
stores them, threaded replies (*balasan*), a stack of drafts (*draf*), coloured
text-art profile pictures, and the interactive tweet and draft commands that a
signed-in user runs.

The package uses only the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `burbir.clock` | `Time` and `DateTime`. They print as `HH:MM:SS` and `DD/MM/YYYY HH:MM:SS`. `DateTime.now()` gives the current local time to the second. |
| `burbir.reader` | `TapeReader` reads words and sentences from a text stream. Each read stops at a `;`, line breaks are skipped, and `EOFError` is raised if the stream ends before the `;`. The module also provides `is_only_blank` and `word_to_integer`. |
| `burbir.intlist` | `IntList` is a list of integers with a capacity. The capacity can be expanded, shrunk or compressed. The list can also be read from a stream, sorted, summed and searched. |
| `burbir.profile_photo` | `ProfilePhoto` is a grid of cells. `render()` returns it as coloured text. It also has matrix operations: add, subtract, multiply, `multiply_mod`, scale, transpose and determinant. The module also provides `colorize`. |
| `burbir.replies` | `Reply` and `ReplyNode` form a tree of replies under a tweet. Nodes can add children, remove themselves, search by id and render themselves. The module also provides `create_reply` and `insert_first`. |
| `burbir.tweets` | `Tweet` (with `detail()`), `create_tweet`, and `TweetTable`. `TweetTable` stores tweets in the order they were added and grows its capacity when it is full. Its `max_id` counts every tweet added. |
| `burbir.drafts` | `DraftStack` is a last-in, first-out stack of draft tweets. |
| `burbir.commands` | `Session` runs the commands `kicau`, `kicauan`, `ubah_kicauan`, `buat_draf` and `lihat_draf` for one user. |

## Reading input

Every answer the user types ends with a semicolon:

```python
import io
from burbir.reader import TapeReader

reader = TapeReader(io.StringIO("Halo semua, apa kabar?;"))
text = reader.read_sentence()   # "Halo semua, apa kabar?"
```

## Posting tweets

A `Session` brings together the things one user's commands work on:

* a user name;
* a reader for input;
* a stream for output;
* the shared tweet table;
* the user's drafts;
* a container that collects the ids of the user's own tweets.

```python
import io
from burbir.commands import Session
from burbir.drafts import DraftStack
from burbir.intlist import IntList
from burbir.reader import TapeReader
from burbir.tweets import TweetTable

out = io.StringIO()
session = Session(
    "Tuan Bri",
    TapeReader(io.StringIO("Pagi yang cerah!;")),
    out,
    TweetTable(10),
    DraftStack(),
    IntList(10, []),
)
session.kicau()      # publishes a new tweet and writes its details
session.kicauan()    # writes every tweet by this user
print(out.getvalue())
```

How the commands behave:

* `kicau` refuses a tweet made only of spaces and returns `None`.
* `ubah_kicauan` changes a tweet's text only when the tweet belongs to the user.
* `buat_draf` asks for a draft, then reads `HAPUS`, `SIMPAN` or `TERBIT` to delete, save or publish it.
* `lihat_draf` takes the newest draft off the stack. It then reads `UBAH`, `HAPUS`, `TERBIT` or `KEMBALI` to change, delete, publish or go back.

A published draft gets the next id from the tweet table. Messages are written in Indonesian.

## What the package does not do

The package is a library. It does not include:

* a program or command loop to start;
* user accounts, sign-in or friendship handling;
* commands for liking tweets or for writing, listing and deleting replies, although reply trees can be built and searched with `burbir.replies`;
* saving or loading data to or from files. Everything lives in memory for as long as the objects do.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.