"""A first-fit free-list allocator over a simulated, growable heap."""

UNIT = 16  # size of a block header; every block is a whole number of these
_MIN_GROW_UNITS = 4096
_BASE = 0  # the zero-size sentinel block that anchors the circular free list
_HEAP_START = 1


class OutOfMemory(MemoryError):
    """Raised when the heap cannot grow enough to satisfy a request."""


class Allocator:
    """Hands out addresses from a heap that grows up to `limit` bytes."""

    def __init__(self, limit):
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self.heap_bytes = 0
        self._brk = _HEAP_START
        self._size = {}
        self._next = {}
        self._live = set()
        self._freep = None

    def _morecore(self, nunits):
        nunits = max(nunits, _MIN_GROW_UNITS)
        if self.heap_bytes + nunits * UNIT > self.limit:
            return None
        header = self._brk
        self._brk += nunits
        self.heap_bytes += nunits * UNIT
        self._size[header] = nunits
        self._live.add(header)
        self.free((header + 1) * UNIT)
        return self._freep

    def malloc(self, nbytes):
        """Allocate `nbytes` bytes and return the address of the block."""
        if nbytes < 0:
            raise ValueError("nbytes must not be negative")
        nunits = (nbytes + UNIT - 1) // UNIT + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._live.add(p)
                return (p + 1) * UNIT
            if p == self._freep:
                p = self._morecore(nunits)
                if p is None:
                    raise OutOfMemory(f"cannot allocate {nbytes} bytes")
            prevp = p
            p = self._next[p]

    def free(self, addr):
        """Return the block at `addr` to the free list, merging neighbours."""
        bp = addr // UNIT - 1
        if addr % UNIT or bp not in self._live:
            raise ValueError(f"address {addr:#x} was not allocated")
        self._live.discard(bp)
        size, nxt = self._size, self._next
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        after = nxt[p]
        if bp + size[bp] == after:
            size[bp] += size.pop(after)
            nxt[bp] = nxt.pop(after)
        else:
            nxt[bp] = after
        if p + size[p] == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p