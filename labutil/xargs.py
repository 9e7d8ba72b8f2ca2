"""Build one command per input line, appending the line to fixed arguments."""

from .riscv import MAXARG

MESGSIZE = 16


def build_commands(args, data):
    """Return the argument vectors xargs would run for `data`.

    Only the first MESGSIZE characters of `data` are read; every complete
    line among them yields `args` followed by that line. Text after the last
    newline is ignored.
    """
    args = list(args)
    if len(args) + 2 > MAXARG:
        raise ValueError(f"too many arguments: at most {MAXARG - 2} allowed")
    if isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data).decode("latin-1")
    *lines, _ = data[:MESGSIZE].split("\n")
    return [args + [line] for line in lines]