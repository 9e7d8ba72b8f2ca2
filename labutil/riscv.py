"""Sv39 paging arithmetic, control-register bit layouts and kernel limits."""

MASK64 = (1 << 64) - 1

# System-wide limits.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 1000
MAXPATH = 128

# Machine status register.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor interrupt enable.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

# Machine interrupt enable.
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

SATP_SV39 = 8 << 60

PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4

PXMASK = 0x1FF

# One beyond the highest usable virtual address (one bit less than Sv39 allows).
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

PTES_PER_PAGE = 512


def pg_round_up(sz):
    """Round a size up to a page boundary (64-bit wrap-around)."""
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1) & MASK64


def pg_round_down(a):
    """Round an address down to a page boundary."""
    return a & ~(PGSIZE - 1) & MASK64


def pa2pte(pa):
    """Shift a physical address into PTE position."""
    return ((pa & MASK64) >> 12) << 10


def pte2pa(pte):
    """Extract the physical address held in a PTE."""
    return ((pte >> 10) << 12) & MASK64


def pte_flags(pte):
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def px(level, va):
    """Return the 9-bit page-table index of `va` for the given level."""
    shift = PGSHIFT + 9 * level
    return ((va & MASK64) >> shift) & PXMASK


def make_satp(pagetable):
    """Build a satp value selecting Sv39 with the given root table."""
    return SATP_SV39 | ((pagetable & MASK64) >> 12)