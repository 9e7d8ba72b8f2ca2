"""The Park–Miller "minimal standard" pseudo-random generator."""

_MODULUS = 0x7FFFFFFF  # 2**31 - 1
_MULTIPLIER = 16807  # 7**5
_Q = 127773  # _MODULUS // _MULTIPLIER
_R = 2836  # _MODULUS % _MULTIPLIER
_MASK64 = (1 << 64) - 1


def do_rand(ctx):
    """Return the value that follows state `ctx`; it is also the new state.

    Results lie in the range [0, 0x7ffffffd].
    """
    x = ((ctx & _MASK64) % (_MODULUS - 1)) + 1
    hi, lo = divmod(x, _Q)
    x = _MULTIPLIER * lo - _R * hi
    if x < 0:
        x += _MODULUS
    return x - 1


class ParkMillerRandom:
    """A stream of pseudo-random numbers started from `seed`."""

    def __init__(self, seed=1):
        self.state = seed & _MASK64

    def next(self):
        """Advance the generator and return the new value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()