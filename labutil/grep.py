"""A minimal grep supporting the ^ . * $ operators."""

import sys

_CHUNK = 1024


def match(pattern, text):
    """True if `pattern` matches anywhere in `text`."""
    if pattern.startswith("^"):
        return _match_here(pattern, 1, text, 0)
    return any(_match_here(pattern, 0, text, i) for i in range(len(text) + 1))


def _match_here(regex, ri, text, ti):
    if ri == len(regex):
        return True
    if ri + 1 < len(regex) and regex[ri + 1] == "*":
        return _match_star(regex[ri], regex, ri + 2, text, ti)
    if regex[ri] == "$" and ri + 1 == len(regex):
        return ti == len(text)
    if ti < len(text) and regex[ri] in (".", text[ti]):
        return _match_here(regex, ri + 1, text, ti + 1)
    return False


def _match_star(char, regex, ri, text, ti):
    while True:
        if _match_here(regex, ri, text, ti):
            return True
        if ti >= len(text):
            return False
        current = text[ti]
        ti += 1
        if current != char and char != ".":
            return False


def grep_lines(pattern, stream):
    """Yield each newline-terminated line of `stream` that matches `pattern`.

    Lines keep their newline; a final line without one is not considered.
    """
    pending = ""
    while chunk := stream.read(_CHUNK):
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                yield line + "\n"


def main(argv=None):
    """Run grep over the named files, or standard input; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: grep pattern [file ...]", file=sys.stderr)
        return 1
    pattern, files = args[0], args[1:]
    if not files:
        sys.stdout.writelines(grep_lines(pattern, sys.stdin))
        return 0
    for name in files:
        try:
            stream = open(name, encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            print(f"grep: cannot open {name}")
            return 1
        with stream:
            sys.stdout.writelines(grep_lines(pattern, stream))
    return 0