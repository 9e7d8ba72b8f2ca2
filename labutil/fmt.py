"""A small printf understanding %d %l %x %p %s %c and %%."""

from .riscv import MASK64

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF


def _int32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _format_int(value, base, signed):
    negative = signed and value < 0
    x = -value if negative else value
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if not x:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def format_message(fmt, *args):
    """Format `args` according to `fmt` and return the resulting text."""
    values = iter(args)

    def next_arg():
        try:
            return next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    out = []
    in_spec = False
    for char in fmt:
        if not in_spec:
            if char == "%":
                in_spec = True
            else:
                out.append(char)
            continue
        in_spec = False
        if char == "d":
            out.append(_format_int(_int32(next_arg()), 10, True))
        elif char == "l":
            out.append(_format_int(next_arg() & MASK64, 10, False))
        elif char == "x":
            out.append(_format_int(next_arg() & _MASK32, 16, False))
        elif char == "p":
            out.append("0x" + format(next_arg() & MASK64, "016X"))
        elif char == "s":
            value = next_arg()
            out.append("(null)" if value is None else str(value))
        elif char == "c":
            value = next_arg()
            out.append(chr(value & 0xFF) if isinstance(value, int) else str(value))
        elif char == "%":
            out.append("%")
        else:
            # Unknown sequences are echoed so they stand out.
            out.append("%" + char)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write the formatted message to `stream`."""
    stream.write(format_message(fmt, *args))