"""Memory cells: values held as ``x = N*t + s + 1`` modulo ``N**2``.

A cell can be kept as its ``(t, s)`` pair (:class:`CellTs`), as the raw
``x`` (:class:`CellX`), paired with its inverse (:class:`CellInv`), or in
two forms checked against each other (:class:`DoublePlug`). With ``N`` of
zero the cells work in open mode, using a fixed half-width split.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, NamedTuple, Union

from .arith import UNUMBER_BITS, wrap
from .euclid import invert as _mod_invert

FAKE_N = 1 << (UNUMBER_BITS // 2)


class CellError(ArithmeticError):
    """Raised on an operation a cell cannot carry out."""


class Vtype(Enum):
    """Which representation a cell is built around."""

    X = "x"
    TS = "ts"


class TsVal(NamedTuple):
    """The ``(t, s)`` pair of a cell."""

    t: int
    s: int


def _square(n: int) -> int:
    return wrap(n * n)


def _mulmod(a: int, b: int, m: int) -> int:
    return (a * b) % m if m else 0


def _to_x(n: int, t: int, s: int) -> int:
    if n == 0:
        return wrap(t + FAKE_N * s + 1)
    return wrap(n * t + s + 1)


def _inverse(x: int, n: int) -> int:
    if n == 0:
        return wrap(2 - x)
    r = _mod_invert(x, n)
    if r is None:
        raise CellError(f"Cannot invert {x}")
    return r


def _split_open(x: int) -> tuple[int, int]:
    """Split ``x - 1`` (already decremented) in open mode into ``(t, s)``."""
    negx = wrap(-x)
    if not negx < x:
        s, t = divmod(x, FAKE_N)
        return t, s
    s, t = divmod(negx, FAKE_N)
    return wrap(-t), s


def _ts_str(v: TsVal) -> str:
    return str(v.t) if v.s == 0 else f"{v.t}.{v.s}"


@dataclass(frozen=True)
class CellTs:
    """A cell stored as its ``(t, s)`` pair."""

    based: ClassVar[Vtype] = Vtype.TS

    n: int = field(default=0, compare=False)
    t: int = 0
    s: int = 0

    @classmethod
    def from_ts(cls, n: int, t: int, s: int = 0) -> CellTs:
        return cls(n, wrap(t), wrap(s))

    @classmethod
    def from_x(cls, n: int, x: int) -> CellTs:
        x = wrap(x)
        if n == 0:
            t, s = _split_open(wrap(x - 1))
            return cls(n, t, s)
        if x == 0:
            raise CellError("Operation with zero")
        t, s = divmod(x - 1, n)
        return cls(n, t, s)

    def ts(self) -> TsVal:
        return TsVal(self.t, self.s)

    def x(self) -> int:
        return _to_x(self.n, self.t, self.s)

    def invert(self) -> CellTs:
        return CellTs.from_x(self.n, _inverse(self.x(), _square(self.n)))

    def increment(self) -> CellTs:
        t = wrap(self.t + 1)
        if self.n and t >= self.n:
            t = wrap(t - self.n)
        return replace(self, t=t)

    def decrement(self) -> CellTs:
        t = wrap(self.t - 1)
        if self.n and t >= self.n:
            t = wrap(t + self.n)
        return replace(self, t=t)

    def __lt__(self, other: CellTs) -> bool:
        return (self.s, self.t) < (other.s, other.t)

    def __mul__(self, other: CellTs) -> CellTs:
        return CellTs.from_x(self.n, _mulmod(self.x(), other.x(), _square(self.n)))

    def __str__(self) -> str:
        return _ts_str(self.ts())


@dataclass(frozen=True)
class CellX:
    """A cell stored as its raw value ``x``."""

    based: ClassVar[Vtype] = Vtype.X

    n: int = field(default=0, compare=False)
    z: int = 1

    @classmethod
    def from_ts(cls, n: int, t: int, s: int = 0) -> CellX:
        return cls(n, _to_x(n, wrap(t), wrap(s)))

    @classmethod
    def from_x(cls, n: int, x: int) -> CellX:
        return cls(n, wrap(x))

    def ts(self) -> TsVal:
        x = wrap(self.z - 1)
        if self.n == 0:
            return TsVal(*_split_open(x))
        t, s = divmod(x, self.n)
        return TsVal(t, s)

    def x(self) -> int:
        return self.z

    def invert(self) -> CellX:
        return CellX(self.n, _inverse(self.z, _square(self.n)))

    def increment(self) -> CellX:
        if self.n == 0:
            return replace(self, z=wrap(self.z + 1))
        n2 = _square(self.n)
        z = wrap(self.z + self.n)
        if z >= n2:
            z = wrap(z - n2)
        return replace(self, z=z)

    def decrement(self) -> CellX:
        if self.n == 0:
            return replace(self, z=wrap(self.z - 1))
        n2 = _square(self.n)
        z = wrap(self.z - self.n)
        if z >= n2:
            z = wrap(z + n2)
        return replace(self, z=z)

    def __lt__(self, other: CellX) -> bool:
        return self.z < other.z

    def __mul__(self, other: CellX) -> CellX:
        return CellX(self.n, _mulmod(self.z, other.z, _square(self.n)))

    def __str__(self) -> str:
        return _ts_str(self.ts())


BaseCell = Union[CellTs, CellX]


@dataclass(frozen=True, eq=False)
class CellInv:
    """A cell carried together with its multiplicative inverse."""

    a: BaseCell
    b: BaseCell

    @property
    def based(self) -> Vtype:
        return self.a.based

    @property
    def n(self) -> int:
        return self.a.n

    @classmethod
    def unit(cls, n: int, base: type = CellX) -> CellInv:
        return cls(base(n), base(n))

    @classmethod
    def from_ts(cls, n: int, t: int, s: int = 0, base: type = CellX) -> CellInv:
        a = base.from_ts(n, t, s)
        return cls(a, a.invert())

    @classmethod
    def from_x(cls, n: int, x: int, base: type = CellX) -> CellInv:
        a = base.from_x(n, x)
        return cls(a, a.invert())

    def ts(self) -> TsVal:
        return self.a.ts()

    def x(self) -> int:
        return self.a.x()

    def invert(self) -> CellInv:
        return CellInv(self.b, self.a)

    def increment(self) -> CellInv:
        return CellInv(self.a.increment(), self.b.decrement())

    def decrement(self) -> CellInv:
        return CellInv(self.a.decrement(), self.b.increment())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellInv):
            return NotImplemented
        return self.a == other.a

    def __hash__(self) -> int:
        return hash(self.a)

    def __lt__(self, other: CellInv) -> bool:
        return self.a < other.a

    def __mul__(self, other: CellInv) -> CellInv:
        return CellInv(self.a * other.a, self.b * other.b)

    def __str__(self) -> str:
        return str(self.a)


@dataclass(frozen=True, eq=False)
class DoublePlug:
    """A cell held both as :class:`CellTs` and as ``CellInv`` over
    :class:`CellX`; every operation checks that the two agree."""

    based: ClassVar[Vtype] = Vtype.TS

    a: CellTs
    b: CellInv

    @classmethod
    def from_cellts(cls, cell: CellTs) -> DoublePlug:
        t, s = cell.ts()
        return cls(CellTs.from_ts(cell.n, t, s), CellInv.from_ts(cell.n, t, s, CellX))

    @classmethod
    def unit(cls, n: int) -> DoublePlug:
        return cls(CellTs(n), CellInv.unit(n, CellX))

    @classmethod
    def from_ts(cls, n: int, t: int, s: int = 0) -> DoublePlug:
        return cls(CellTs.from_ts(n, t, s), CellInv.from_ts(n, t, s, CellX))

    @classmethod
    def from_x(cls, n: int, x: int) -> DoublePlug:
        return cls(CellTs.from_x(n, x), CellInv.from_x(n, x, CellX))

    @staticmethod
    def _check(a: CellTs, b: CellInv) -> None:
        ats, bts = a.ts(), b.ts()
        if ats.t != bts.t:
            raise CellError("cell forms disagree on t")
        if ats.s != bts.s:
            raise CellError("cell forms disagree on s")
        if a.x() != b.x():
            raise CellError("cell forms disagree on x")

    @property
    def n(self) -> int:
        return self.a.n

    def ts(self) -> TsVal:
        self._check(self.a, self.b)
        return self.a.ts()

    def x(self) -> int:
        self._check(self.a, self.b)
        return self.a.x()

    def invert(self) -> DoublePlug:
        x = self.a.invert()
        y = self.b.invert()
        self._check(self.a, self.b)
        self._check(x, y)
        return DoublePlug.from_cellts(x)

    def increment(self) -> DoublePlug:
        r = DoublePlug(self.a.increment(), self.b.increment())
        self._check(r.a, r.b)
        return r

    def decrement(self) -> DoublePlug:
        r = DoublePlug(self.a.decrement(), self.b.decrement())
        self._check(r.a, r.b)
        return r

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublePlug):
            return NotImplemented
        self._check(self.a, self.b)
        return self.a == other.a

    def __hash__(self) -> int:
        return hash(self.a)

    def __lt__(self, other: DoublePlug) -> bool:
        self._check(self.a, self.b)
        return self.a < other.a

    def __mul__(self, other: DoublePlug) -> DoublePlug:
        ra = self.a * other.a
        rb = self.b * other.b
        self._check(ra, rb)
        return DoublePlug.from_cellts(ra)

    def __str__(self) -> str:
        self._check(self.a, self.b)
        return str(self.a)


Cell = CellInv
CELL_NAME = "4:InvX"


def make_cell(n: int, t: int = 0, s: int = 0) -> CellInv:
    """Build the working cell type from its ``(t, s)`` pair."""
    return CellInv.from_ts(n, t, s, CellX)


def cell_from_x(n: int, x: int) -> CellInv:
    """Build the working cell type from its raw value ``x``."""
    return CellInv.from_x(n, x, CellX)


def minus_one(n: int) -> CellInv:
    """The cell whose ``t`` is minus one (``N - 1``, or all ones when open)."""
    t = n - 1 if n else wrap(-1)
    return CellInv.from_ts(n, t, 0, CellX)