"""Parsing of shell command lines into command trees."""

import enum
from dataclasses import dataclass, field

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
MAXARGS = 10


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


class RedirMode(enum.Enum):
    """How a redirected file is opened."""

    READ = "<"
    TRUNCATE = ">"
    APPEND = ">>"


@dataclass
class ExecCmd:
    """A program and its arguments."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """A command whose file descriptor `fd` is redirected to `file`."""

    cmd: object
    file: str
    mode: RedirMode
    fd: int


@dataclass
class PipeCmd:
    """Two commands joined by a pipe."""

    left: object
    right: object


@dataclass
class ListCmd:
    """Two commands run one after the other."""

    left: object
    right: object


@dataclass
class BackCmd:
    """A command run in the background."""

    cmd: object


_REDIRECTS = {
    "<": (RedirMode.READ, 0),
    ">": (RedirMode.TRUNCATE, 1),
    "+": (RedirMode.APPEND, 1),
}


class _Parser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def at_end(self):
        return self.pos >= len(self.text)

    def _skip_space(self):
        while not self.at_end and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self._skip_space()
        return not self.at_end and self.text[self.pos] in toks

    def token(self):
        """Return (kind, word); kind is None at the end of input."""
        self._skip_space()
        start = self.pos
        if self.at_end:
            return None, ""
        char = self.text[start]
        if char in "|();&<":
            self.pos += 1
            kind = char
        elif char == ">":
            self.pos += 1
            kind = ">"
            if not self.at_end and self.text[self.pos] == ">":
                kind = "+"
                self.pos += 1
        else:
            kind = "a"
            while (
                not self.at_end
                and self.text[self.pos] not in WHITESPACE
                and self.text[self.pos] not in SYMBOLS
            ):
                self.pos += 1
        word = self.text[start:self.pos]
        self._skip_space()
        return kind, word

    def line(self):
        cmd = self.pipe()
        while self.peek("&"):
            self.token()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.token()
            cmd = ListCmd(cmd, self.line())
        return cmd

    def pipe(self):
        cmd = self.exec()
        if self.peek("|"):
            self.token()
            cmd = PipeCmd(cmd, self.pipe())
        return cmd

    def redirs(self, cmd):
        while self.peek("<>"):
            kind, _ = self.token()
            file_kind, name = self.token()
            if file_kind != "a":
                raise ShellSyntaxError("missing file for redirection")
            mode, fd = _REDIRECTS[kind]
            cmd = RedirCmd(cmd, name, mode, fd)
        return cmd

    def block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.token()
        cmd = self.line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.token()
        return self.redirs(cmd)

    def exec(self):
        if self.peek("("):
            return self.block()
        cmd = ExecCmd()
        ret = self.redirs(cmd)
        while not self.peek("|)&;"):
            kind, word = self.token()
            if kind is None:
                break
            if kind != "a":
                raise ShellSyntaxError("syntax")
            cmd.argv.append(word)
            if len(cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.redirs(ret)
        return ret


def parse_command(text):
    """Parse a command line into a tree of command objects."""
    parser = _Parser(text)
    cmd = parser.line()
    parser.peek("")
    if not parser.at_end:
        raise ShellSyntaxError(f"syntax: leftovers: {text[parser.pos:]}")
    return cmd


def cd_target(line):
    """Return the directory of a `cd` line, or None for any other line.

    The line terminator read with the line is dropped.
    """
    if not line.startswith("cd "):
        return None
    if line.endswith(("\n", "\r")):
        return line[3:-1]
    return line[3:]