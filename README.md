# zdkit

A grab bag of small building blocks, with no dependencies outside the
standard library:

- `zdkit.wildcard` – `wildcard_match(text, pattern)` with `*` (any run of
  characters, including none) and `?` (exactly one character). A missing
  text or pattern never matches.
- `zdkit.log` – `log(level, fmt, *args)` writes a coloured, tagged line to
  standard error and returns it. Levels are in `LogLevel` (`INFO`, `ERROR`,
  `GOOD`, `TODO`, `FATAL`); `FATAL` and `TODO` raise `FatalError` after the
  line is written.
- Containers:
  - `DynamicArray` (`zdkit.dynarray`) – ordered items with `append`,
    `insert`, `remove`, `set`, `get`, a resettable cursor `next` and
    `clear`; out-of-range positions are ignored and `get` returns `None`.
  - `DynamicBuffer` (`zdkit.buffer`) – a zero-filled `bytearray` grown or
    shrunk with `resize`.
  - `ZString` (`zdkit.zstring`) – text built with `%`-formatted `append`,
    tracking `length` and a capacity that starts at 128 and doubles; plus
    `substring(text, start, end)` and `repeat(text, times)`.
  - `Stack` (`zdkit.stack`), `Queue` (`zdkit.fifo`) and `LinkedList`
    (`zdkit.linkedlist`, with in-place `reverse`).
  - `TrieNode` (`zdkit.trie`) – a prefix tree over `a`–`z` whose `search`
    returns how many times a word was inserted.
  - `HashTable` (`zdkit.hashtable`) – chained buckets that start at four,
    double above a load of 0.75 and halve below 0.25; also the hash
    functions `djb_hash`, `sdbm_hash`, `int_hash`, `float_hash` and
    `string_hash`.
- Every container takes an optional release hook (`clear_item`, or
  `key_free` / `val_free` for the hash table) called on items that leave
  it.
- `zdkit.cmdline` – `CommandLine`, a forgiving option parser: add rules
  with `define`, parse with `build`, then ask `isuse` / `get_opt`, print
  `usage` or `dump`. Rule violations raise `CommandLineError`.
- `zdkit.printing` – rainbow text (`color_text`, `print_color`) and boxed
  tables (`format_table`, `print_table`).

## Installing

```
pip install .
```

Add the `test` extra to get the test runner:

```
pip install ".[test]"
pytest
```

## Examples

Wildcards:

```python
from zdkit.wildcard import wildcard_match

wildcard_match("abcdef", "a*d?f")   # True
wildcard_match("abc", "a?")         # False
```

Parsing a command line:

```python
from zdkit.cmdline import CommandLine, OptType

cmdline = CommandLine(merge_opt=True)
cmdline.define(OptType.SINGLE_ARG, None, "o", None)
cmdline.define(OptType.SINGLE_ARG, None, "I", None)
cmdline.build(["cc", "main.c", "-o", "app", "-I", "../src/", "-I./"])

cmdline.pargs                       # ['main.c']
cmdline.isuse("o")                  # True
cmdline.get_opt("I").vals           # ['../src/', './']
```

A hash table keyed by strings:

```python
from zdkit.hashtable import HashTable

table = HashTable()
table.insert("apple", 6)
table.search("apple")               # True
table.set("apple", 7)
table.get("apple")                  # 7
table.remove("apple")
```

## What it does not do

zdkit is a library only: it installs no command. It has no file or
directory helpers, no unit-test runner and no way to run build steps;
`CommandLine` parses arguments but leaves acting on them to you.