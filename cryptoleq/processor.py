"""The processor: range parameters of a modulus and the core cell operations."""

from __future__ import annotations

from .arith import UNUMBER_MAX, to_str, wrap
from .cell import Vtype, cell_from_x, make_cell


class ProcessorError(ValueError):
    """Raised when the processor is given an unusable parameter or instruction."""


def congruence(x: int, n: int) -> int:
    """Reduce ``x`` by ``n``.

    Small values are reduced by repeated subtraction while ``n < x``, so a
    value equal to ``n`` is left as it is; larger values take the remainder.
    A zero ``n`` leaves ``x`` unchanged.
    """
    x = wrap(x)
    if n == 0:
        return x
    if wrap(n << 2) > x:
        while n < x:
            x -= n
        return x
    return x % n


class Processor:
    """Range parameters for modulus ``N`` and the operations on cells.

    ``N`` of zero is the open mode, where cells hold plain numbers.
    """

    def __init__(self, n: int = 0) -> None:
        n = wrap(n)
        if n == 1:
            raise ProcessorError("N cannot be 1")
        self.n = n
        self.n2 = 0
        self.a2 = 0
        self.b2 = 0
        self.beta = 0
        self.high_bit_pos_n2 = 0
        self.high_bit_pos_n = wrap(n - 1).bit_length() - 1
        self.xp1 = 2
        self.xp2 = UNUMBER_MAX >> 1

        if n == 0:
            return

        self.n2 = wrap(n * n)
        self.high_bit_pos_n2 = self.n2.bit_length() - 1

        self.a2 = 1 << (n.bit_length() - 1)
        m = n - self.a2
        if m == 0:
            if self.high_bit_pos_n > 1:
                self.set_beta(self.high_bit_pos_n - 1)
        else:
            nbit = max(1, m.bit_length() - 1)
            self.set_beta(nbit)
            if not self.b2 * 2 < self.a2:
                self.set_beta(nbit - 1)

        tpmax = (1 << self.high_bit_pos_n) - 1
        self.xp1 = wrap(n + 1)
        self.xp2 = wrap(n * (tpmax + 1))

    def set_beta(self, b: int) -> None:
        """Set ``beta`` and ``B2 = 2**beta``; beta may only go down."""
        if self.beta and b > self.beta:
            raise ProcessorError(
                f"Setting beta above predefined is forbidden; increase N "
                f"(current beta {self.beta}; new value {b})"
            )
        if self.n == 0 and b > self.high_bit_pos_n // 2:
            raise ProcessorError(
                f"Setting beta too high: tried {b}, "
                f"allowed value is {self.high_bit_pos_n // 2}"
            )
        self.beta = b
        self.b2 = 1 << b

    def show(self) -> str:
        """Describe the processor parameters on one line."""
        return (
            f"Processor: N={self.n} N2={self.n2} M={to_str(self.n - self.a2)}"
            f" A2={self.a2} B2={self.b2} beta={self.beta}"
            f" high_bit_posN={self.high_bit_pos_n}"
        )

    def _leq_u(self, x: int) -> bool:
        return x == 0 or bool((x >> self.high_bit_pos_n) & 1)

    def _leq_ts(self, cell) -> bool:
        return self._leq_u(cell.ts().t)

    def _leq_x(self, cell) -> bool:
        x = cell.x()
        return x < self.xp1 or self.xp2 < x

    def leq(self, cell) -> bool:
        """Tell whether the cell holds zero or a negative value."""
        if cell.based == Vtype.X:
            return self._leq_x(cell)
        return self._leq_ts(cell)

    def bam1(self, a, b):
        """Return ``B - A``: ``A**-1 * B`` when encrypted, plain difference when open."""
        if self.n == 0:
            return self.batt(a, b)
        return a.invert() * b

    def batt(self, a, b):
        """Subtract the ``t`` parts of two cells that share the same ``s``."""
        at, as_ = a.ts()
        bt, bs = b.ts()
        if as_ != bs:
            raise ProcessorError("Illegal instruction")
        return make_cell(self.n, wrap(bt - at), as_)

    def cell_str(self, cell) -> str:
        """Render a cell; in open mode negative values get a minus sign."""
        if self.n != 0:
            return str(cell)
        t, s = cell.ts()
        if t == 0 and s == 0:
            return "0"
        xx = cell.x()
        if not self._leq_u(xx):
            return str(cell)
        return "-" + to_str(wrap(1 - xx))

    def x2cell(self, x: int):
        """Build a cell from its raw value."""
        return cell_from_x(self.n, x)