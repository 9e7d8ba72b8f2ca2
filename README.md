# labutil

Small, self-contained building blocks from a teaching operating system,
written as plain Python with no dependencies outside the standard library.
Python 3.10 or later is required.

## Modules

- **`labutil.riscv`** – Sv39 address arithmetic: `pg_round_up`,
  `pg_round_down`, `pa2pte`, `pte2pa`, `pte_flags`, `px` and `make_satp`,
  together with page-table entry bits (`PTE_V`, `PTE_R`, `PTE_W`, `PTE_X`,
  `PTE_U`), control-register bit layouts, `PGSIZE`, `MAXVA` and the system
  limits such as `MAXARG` and `MAXPATH`.
- **`labutil.elf`** – `ElfHeader.from_bytes` parses and checks a 64-bit
  little-endian ELF file header, and `ElfHeader.program_headers` returns its
  `ProgramHeader` entries; `ProgramHeader.is_load` tells loadable segments.
  Short or malformed input raises `ElfFormatError`.
- **`labutil.shell`** – `parse_command` turns a command line into a tree of
  `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd`, raising
  `ShellSyntaxError` on bad input (including more than nine arguments to one
  command). `cd_target` returns the directory of a `cd` line, or `None`.
- **`labutil.grep`** – a tiny regular-expression matcher supporting
  `^ . * $`: `match(pattern, text)` and `grep_lines(pattern, stream)`, which
  yields matching newline-terminated lines.
- **`labutil.fmt`** – `format_message` and `fprintf` for the minimal format
  language `%d %l %x %p %s %c %%`; unknown sequences are echoed as written.
- **`labutil.textutils`** – `count_words` (returning a `WordCount` of lines,
  words and chars), `cat`, `echo`, `atoi` and `read_line`.
- **`labutil.umalloc`** – a first-fit free-list `Allocator` over a simulated
  heap with `malloc` and `free`; it raises `OutOfMemory` when its byte limit
  is reached and `ValueError` when freeing an address it did not hand out.
- **`labutil.rand`** – the Park–Miller generator: `do_rand` and the iterable
  `ParkMillerRandom`.
- **`labutil.pathutils`** – `basename`, `fmtname` (blank-padded to 14
  characters), `find`, which yields matching regular files under a directory,
  and `list_dir`, which yields one line per entry with its name, kind, inode
  number and size.
- **`labutil.xargs`** – `build_commands` turns the first 16 characters of
  input into one argument list per complete line.

## Command line

The package installs one command, a line filter:

```
labutil-grep PATTERN [FILE ...]
```

With no files it reads standard input. Every newline-terminated line that
matches `PATTERN` is written to standard output. It exits with status 1 when
no pattern is given or a file cannot be opened.

```
labutil-grep '^def ' labutil/shell.py
```

## Library examples

Parse a shell command line:

```python
from labutil.shell import parse_command, PipeCmd

cmd = parse_command("cat < notes.txt | grep todo > out.txt")
assert isinstance(cmd, PipeCmd)
```

Match with the tiny regular-expression language:

```python
from labutil.grep import match

assert match("^ab.*c$", "abxyzc")
assert not match("^b", "abc")
```

Format a message:

```python
from labutil.fmt import format_message

assert format_message("%d items at %p", 3, 0x1000) == "3 items at 0x0000000000001000"
```

Count lines, words and characters:

```python
from labutil.textutils import count_words, WordCount

assert count_words(b"hello world\n") == WordCount(lines=1, words=2, chars=12)
```

Allocate from the free-list allocator:

```python
from labutil.umalloc import Allocator

heap = Allocator(1 << 20)
block = heap.malloc(100)
heap.free(block)
```

Build argument lists from input lines:

```python
from labutil.xargs import build_commands

assert build_commands(["echo"], "a\nb\n") == [["echo", "a"], ["echo", "b"]]
```

## What the package does not do

- It does not run commands. `labutil.shell` only parses a command line into
  a tree, and `labutil.xargs` only builds argument lists; nothing is
  executed, piped or redirected.
- It does not simulate page tables or physical memory. `labutil.riscv`
  offers the address arithmetic and entry bits only.
- It does not load programs: `labutil.elf` reads headers but maps nothing.

## Running the tests

Install the package together with its `test` extra, then run pytest from the
project directory.