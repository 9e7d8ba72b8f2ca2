"""Teaching-kernel building blocks: Sv39 arithmetic, ELF headers, a shell parser and user utilities."""

__version__ = "0.1.0"

__all__ = [
    "elf",
    "fmt",
    "grep",
    "pathutils",
    "rand",
    "riscv",
    "shell",
    "textutils",
    "umalloc",
    "xargs",
]