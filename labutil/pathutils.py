"""Directory walking and listing: find files by name and list directories."""

import os
import stat
import sys

DIRSIZ = 14
_BUFSIZE = 512


def basename(path):
    """Return the part of `path` after its last slash."""
    return path.rsplit("/", 1)[-1]


def fmtname(path):
    """Return the base name padded with blanks to DIRSIZ characters.

    Names of DIRSIZ characters or more are returned unpadded.
    """
    name = basename(path)
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _too_long(path):
    return len(path) + 1 + DIRSIZ + 1 > _BUFSIZE


def find(path, target):
    """Yield the paths of regular files under `path` whose name is `target`."""
    try:
        st = os.lstat(path)
    except OSError:
        print(f"find: cannot open {path}", file=sys.stderr)
        return
    if stat.S_ISREG(st.st_mode):
        if basename(path) == target:
            yield path
    elif stat.S_ISDIR(st.st_mode):
        if _too_long(path):
            print("find: path too long", file=sys.stderr)
            return
        try:
            names = sorted(os.listdir(path))
        except OSError:
            print(f"find: cannot open {path}", file=sys.stderr)
            return
        for name in names:
            yield from find(f"{path}/{name}", target)


def _kind(mode):
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISREG(mode):
        return "file"
    return "dev"


def _line(path, st):
    return f"{fmtname(path)} {_kind(st.st_mode)} {st.st_ino} {st.st_size}"


def list_dir(path="."):
    """Yield one line per entry: padded name, kind, inode number and size.

    A file yields its own line; a directory yields lines for ".", ".." and
    each entry in it.
    """
    try:
        st = os.stat(path)
    except OSError:
        print(f"ls: cannot open {path}", file=sys.stderr)
        return
    if not stat.S_ISDIR(st.st_mode):
        if stat.S_ISREG(st.st_mode):
            yield _line(path, st)
        return
    if _too_long(path):
        print("ls: path too long")
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        print(f"ls: cannot open {path}", file=sys.stderr)
        return
    for name in [".", ".."] + names:
        full = f"{path}/{name}"
        try:
            entry = os.stat(full)
        except OSError:
            print(f"ls: cannot stat {full}")
            continue
        yield _line(full, entry)