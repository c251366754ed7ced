# dolkit

Tools for working with GameCube executables, and Python versions of a few
small runtime structures from a game base library.

## Converting ELF to DOL

The `elf2dol` command turns a big-endian 32-bit PowerPC ELF executable into a
DOL file, laying out its loadable segments one by one:

```
elf2dol [-h] [-v] [--] input.elf output.dol
```

- Executable segments become TEXT sections (at most 7).
- Other segments with file contents become DATA sections (at most 11).
- Segments with no file contents, and the part of a TEXT segment beyond its
  file size, are merged into a single BSS range.
- Each section starts on a 32-byte boundary in the output and is padded with
  zeros; the header records the section sizes rounded up to 32.
- With no TEXT or no DATA section, the first offset of that kind in the
  header still points just past the header.

Give `-v` once for notes about skipped program headers and dummy sections,
and twice for a full report of the layout. Warnings about non-readable or
writable-and-executable segments are always printed. `-h` prints the usage
and exits with status 1. On any error the command prints a message to
standard error and exits with status 1.

From Python:

```python
from dolkit.elf2dol import build_dol, convert, read_elf_segments

convert("main.elf", "main.dol", verbosity=0)

with open("main.elf", "rb") as fh:
    elf = fh.read()
layout = read_elf_segments(elf)   # a DolLayout
layout.layout()                    # assign DOL offsets
dol = build_dol(layout, elf)       # bytes of the DOL file
header = layout.header_bytes()     # the 256-byte header alone
```

`DolLayout` holds the entry point, the `text` and `data` lists of `Segment`
objects and the BSS range; `add_text`, `add_data` and `add_bss` add to it.
Every failure is raised as `ElfToDolError`.

## Runtime structures

- `dolkit.hsdrandom.HsdRandom(seed=1)`: a linear congruential generator with a
  32-bit state (`seed * 214013 + 2531011`). `rand()` gives the upper 16 bits
  of the new state, `randf()` a float in [0, 1), `randi(max_val)` an integer
  scaled into [0, max_val).
- `dolkit.idtable.IDTable`: a 101-bucket hash table from 32-bit ids to data,
  with `insert`, `remove`, `get(ident, default=None)` and `clear`, plus `in`,
  `len()` and iteration over `(id, data)` pairs. Ids outside the 32-bit range
  raise `ValueError`. `bucket_of(ident)` gives an id's bucket, and
  `default_table()` returns a shared table.
- `dolkit.slist`: `SListNode` and the helpers `append_list` (insert after the
  head), `prepend_list`, `alloc_and_append`, `alloc_and_prepend`, `remove`
  (drop the head, return the rest) and `iter_data`.
- `dolkit.texp`: `TevExpression` and `ConstExpression` nodes, the `TEX` and
  `RAS` input markers, and `get_type`, `ref` and `unref`. Unreferencing a TEV
  stage down to zero colour and alpha references releases its inputs.
- `dolkit.gobj`: `GObj` with its `GObjProc` chain (`procs`, `set_flag1`,
  `clear_flag1`, `clear_flag2`, `set_flag3`) and user data
  (`init_user_data`, `remove_user_data`, which raise `RuntimeError` on
  misuse). `GXLinkTable(gx_link_max)` keeps each render link ordered by
  priority through `setup`, `reorder` and `iter_link`.
- `dolkit.fobj`: `FObj` animation tracks with a four-bit state
  (`set_state`, `get_state`), `req_anim` to restart a track, and
  `iter_chain` / `req_anim_all` over a chain of tracks. `InterpOp` lists the
  interpolation opcodes.
- `dolkit.robj`: `RObj` reference objects (`set_flags`, `has_type`,
  `apply_update`, which activates at a value of 1.75 or more) and
  `get_by_type` to find the first active object of a type and subtype.
- `dolkit.lobj`: `LObj` lights with 16-bit flags (`set_flags`, `clear_flags`)
  and `light_type()` returning a `LightType`.

## What it does not do

The structures above hold state and keep their links and counters right; they
do not render anything, decode or interpret animation key data, load objects
from descriptor data, or manage memory pools. `elf2dol` only converts
executables: it does not read DOL files back or rebuild ELF files from them.

## Running the tests

```
pip install -e .[test]
pytest
```