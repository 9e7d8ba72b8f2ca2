import pytest

from labutil.umalloc import UNIT, Allocator, OutOfMemory


def test_allocations_are_aligned_and_disjoint():
    alloc = Allocator(1 << 20)
    spans = []
    for n in (1, 10, 100, 1000, 16, 17, 0):
        addr = alloc.malloc(n)
        assert addr % UNIT == 0
        spans.append((addr, addr + max(n, 1)))
    spans.sort()
    for (_, end), (start, _) in zip(spans, spans[1:]):
        assert end <= start


def test_free_then_malloc_reuses_address():
    alloc = Allocator(1 << 20)
    alloc.malloc(50)
    addr = alloc.malloc(200)
    alloc.free(addr)
    assert alloc.malloc(200) == addr


def test_heap_grows_only_when_needed():
    alloc = Allocator(1 << 20)
    alloc.malloc(10)
    grown = alloc.heap_bytes
    assert grown > 0
    alloc.malloc(10)
    assert alloc.heap_bytes == grown


def test_out_of_memory_when_limit_too_small():
    alloc = Allocator(1000)
    with pytest.raises(OutOfMemory):
        alloc.malloc(1)


def test_request_larger_than_limit():
    alloc = Allocator(1 << 20)
    with pytest.raises(OutOfMemory):
        alloc.malloc(2 << 20)


def test_exhaust_free_and_allocate_again():
    alloc = Allocator(1 << 20)
    blocks = []
    with pytest.raises(OutOfMemory):
        while True:
            blocks.append(alloc.malloc(10001))
    assert blocks
    used = alloc.heap_bytes
    for addr in blocks:
        alloc.free(addr)
    big = alloc.malloc(1024 * 20)
    assert alloc.heap_bytes == used
    alloc.free(big)


def test_coalescing_allows_large_block():
    alloc = Allocator(1 << 16)
    small = [alloc.malloc(100) for _ in range(20)]
    for addr in reversed(small):
        alloc.free(addr)
    addr = alloc.malloc((1 << 16) - 2 * UNIT)
    assert addr % UNIT == 0
    assert alloc.heap_bytes == 1 << 16


def test_free_unknown_address():
    alloc = Allocator(1 << 20)
    alloc.malloc(8)
    with pytest.raises(ValueError):
        alloc.free(12345 * UNIT)


def test_double_free():
    alloc = Allocator(1 << 20)
    addr = alloc.malloc(8)
    alloc.free(addr)
    with pytest.raises(ValueError):
        alloc.free(addr)


def test_negative_size_rejected():
    alloc = Allocator(1 << 20)
    with pytest.raises(ValueError):
        alloc.malloc(-1)