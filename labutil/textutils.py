"""Small text utilities: word counting, concatenation, echo and parsing helpers."""

from dataclasses import dataclass

_WC_SPACE = " \r\t\n\v\0"
_CAT_CHUNK = 512


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals."""

    lines: int
    words: int
    chars: int


def count_words(data):
    """Count lines, words and characters in bytes or text."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        text = bytes(data).decode("latin-1")
    else:
        text = data
    lines = words = 0
    in_word = False
    for char in text:
        if char == "\n":
            lines += 1
        if char in _WC_SPACE:
            in_word = False
        elif not in_word:
            words += 1
            in_word = True
    return WordCount(lines, words, len(text))


def cat(sources, out):
    """Copy each readable stream in `sources` to `out`; return the amount copied."""
    total = 0
    for source in sources:
        while chunk := source.read(_CAT_CHUNK):
            written = out.write(chunk)
            if written is not None and written != len(chunk):
                raise OSError("cat: write error")
            total += len(chunk)
    return total


def echo(words):
    """Return the words joined by spaces and ended by a newline; nothing if none."""
    words = list(words)
    if not words:
        return ""
    return " ".join(words) + "\n"


def atoi(s):
    """Parse the leading ASCII digits of `s`; 0 if there are none."""
    n = 0
    for char in s:
        if not "0" <= char <= "9":
            break
        n = n * 10 + ord(char) - ord("0")
    return n


def read_line(stream, limit):
    """Read at most `limit - 1` characters, stopping after a newline or return."""
    empty = stream.read(0)
    chars = []
    while len(chars) + 1 < limit:
        char = stream.read(1)
        if not char:
            break
        chars.append(char)
        if char in ("\n", "\r", b"\n", b"\r"):
            break
    return empty.join(chars)