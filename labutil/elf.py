"""Parsing of 64-bit little-endian ELF file and program headers."""

import enum
import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1


class ProgFlag(enum.IntFlag):
    """Permission bits of a program header."""

    EXEC = 1
    WRITE = 2
    READ = 4


_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROG_HEADER = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a well-formed ELF structure."""


@dataclass(frozen=True)
class ProgramHeader:
    """One program segment description."""

    type: int
    flags: int
    off: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    align: int

    SIZE = _PROG_HEADER.size

    @classmethod
    def from_bytes(cls, data):
        """Parse a program header from the start of `data`."""
        if len(data) < _PROG_HEADER.size:
            raise ElfFormatError(
                f"program header needs {_PROG_HEADER.size} bytes, got {len(data)}"
            )
        return cls(*_PROG_HEADER.unpack_from(data))

    def is_load(self):
        """True if this segment is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD


@dataclass(frozen=True)
class ElfHeader:
    """The file header at the start of an ELF executable."""

    magic: int
    elf: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    SIZE = _ELF_HEADER.size

    @classmethod
    def from_bytes(cls, data):
        """Parse and validate the file header at the start of `data`."""
        if len(data) < _ELF_HEADER.size:
            raise ElfFormatError(
                f"ELF header needs {_ELF_HEADER.size} bytes, got {len(data)}"
            )
        header = cls(*_ELF_HEADER.unpack_from(data))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def program_headers(self, data):
        """Return the program headers this header describes within `data`."""
        if self.phnum and self.phentsize < _PROG_HEADER.size:
            raise ElfFormatError(f"program header entry size {self.phentsize} too small")
        headers = []
        for index in range(self.phnum):
            start = self.phoff + index * self.phentsize
            chunk = data[start:start + _PROG_HEADER.size]
            if len(chunk) < _PROG_HEADER.size:
                raise ElfFormatError(f"program header {index} lies beyond end of data")
            headers.append(ProgramHeader.from_bytes(chunk))
        return headers