# mjbase

Base utilities shared by Mahjong game-playing programs: configuration
files, game-record logging, a fixed-size hash table, random sampling,
timing and a TCP client for a line-based game server.

## Contents

- `mjbase.tools` — small helpers: `to_int` (leading integer of a value's
  text), `to_bool`, `hit_rate`, `weighted_coin`, `wind_to_int`,
  `split_with` (drops empty pieces), `split` (keeps them, except a trailing
  one), `combine_with`, `get_time`, `get_current_path`, the file and folder
  helpers `is_file_exist`, `is_dir_exists`, `clear_file`, `create_folder`,
  `get_files_list`, and `format_tile_values`, which lays out 34 per-tile
  values as a table by suit.
- `mjbase.randomness` — `RandomNumberGenerator` (`set_seed`, `random_int`,
  `random_double`; a positive seed reseeds it) and `ReservoirSampler`,
  which keeps one item from a stream, each chosen in proportion to its
  weight (`input`, `clear`, `data`).
- `mjbase.timer` — `Timer`, a stopwatch with `start`, `stop`, `elapsed`
  (in seconds) and `running`.
- `mjbase.hashtable` — `OpenAddressHashTable`, a table of `2**bit_size`
  slots with integer keys and linear probing: `store`, `lookup` (slot index
  or `None`), `get_data`, `is_full`, `clear`.
- `mjbase.initext`, `mjbase.inisection`, `mjbase.inifile` — an INI reader
  and writer. `IniFile` keeps comments, blank lines and ordering, looks up
  sections and keys without regard to ASCII case, and writes itself back to
  its path on `release()` (or on leaving a `with` block) when changed.
  Values are read with `KeyValue.as_int`, `as_float`, `as_bool` and
  `try_value`, and changed with `set_value` and `set_key`.
- `mjbase.ini` — `Ini`, dotted-name access (`"Section.Key"`) to a config
  file through `get_int`, `get_float` and `get_string`. `Ini.instance()`
  loads `config.ini` from the working directory once and raises
  `FileNotFoundError` if it is missing.
- `mjbase.config` — `Config`, a dataclass of communication, search and
  logging settings; `Config.from_ini` fills it from an `Ini`.
- `mjbase.sgf` — `SgfWriter` for game records (`create`, `add_root`,
  `add_tag`, `add_move`, `add_branch`, `end_branch`, `finish`), switched on
  by `Sgf.LogGameSgf` or `Sgf.LogTreeSgf`, and `wind_string`.
- `mjbase.debuglog` — `DebugLogger`, a buffered debug log written to
  numbered files and moved on to the next file when one grows too large;
  `print_debug` writes to stderr when `Debug.PrintDebugMsg` is on.
- `mjbase.client` — `ClientSocket`, a TCP client with `send_text`,
  `recv_line`, `send_floats`/`recv_floats` and `send_int`/`recv_int`
  (little-endian 32-bit values).

## Installing

```
pip install .
```

## Examples

```python
from mjbase.inifile import IniFile

ini = IniFile()
ini.read("[Socket]\nUseSocket=1\nServerPort=8888\n")
print(ini["Socket"]["ServerPort"].as_int(0))   # 8888
print(ini.render())
```

```python
from mjbase.hashtable import OpenAddressHashTable

table = OpenAddressHashTable(bit_size=8)
table.store(42, "value")
index = table.lookup(42)
print(table.get_data(index))                   # value
```

## What this package does not do

It has no Mahjong rules of its own: no tiles, hands, melds or winning
checks, and no player or game loop. It provides no command to run; it is
a library for programs that supply those parts.

## Running the tests

```
pip install .[test]
pytest
```