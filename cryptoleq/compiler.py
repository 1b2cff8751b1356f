"""Key material and encryption for the encrypted processor."""

from __future__ import annotations

from pathlib import Path

from .arith import parse_decimal, to_str, wrap
from .euclid import invert
from .factor import is_prime
from .processor import Processor, congruence

_MAX_BIT_GUARD = 100000


class CompilerError(ValueError):
    """Raised when keys are inconsistent or an encrypted value is malformed."""


def _mulmod(a: int, b: int, m: int) -> int:
    return (a * b) % m if m else 0


def _powmod(b: int, e: int, m: int) -> int:
    if e == 0:
        return 1
    if m == 0:
        return 0
    return pow(b, e, m)


class Compiler:
    """Holds the secret parameters ``p, q, k`` and the random seed.

    Values are encrypted as ``r**N * g**m mod N**2`` with ``g = 1 + k*N``.
    """

    def __init__(self) -> None:
        self.proc = Processor()
        self.p = self.q = self.phi = self.phim1 = 0
        self.k = self.km1 = self.g = self.rnd_n = 0
        self.p1nk1n = 0
        self.nm1 = 0
        self.sneak = 1
        self.rnd = 0
        self.bit_guard = 0

    @property
    def is_rnd(self) -> bool:
        return self.rnd != 0

    def init_pqkru(self, n: int, p: int, q: int, k: int, rnd: int, bit_guard: int) -> None:
        """Set up from ``N`` or ``p, q``, the key ``k``, seed and bit guard."""
        self.p, self.q, self.k, self.rnd = wrap(p), wrap(q), wrap(k), wrap(rnd)
        self.bit_guard = bit_guard
        if (self.p == 0 or self.q == 0) and self.rnd != 0:
            raise CompilerError("Rnd is set but PQ is not")
        self._init(wrap(n))

    def load_pqkru(self, path: str | Path = "pqkru") -> None:
        """Read ``p q k rnd bit_guard`` from a whitespace-separated file."""
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise CompilerError(f"Cannot open {path}") from exc
        tokens = text.split()[:5]
        tokens += ["0"] * (5 - len(tokens))
        self.p, self.q, self.k, self.rnd = (parse_decimal(t) for t in tokens[:4])
        self.bit_guard = parse_decimal(tokens[4])
        self._init(wrap(self.p * self.q))

    def _init(self, n: int) -> None:
        pq = wrap(self.p * self.q)
        if n and pq and n != pq:
            raise CompilerError("Inconsistent P Q N")

        self.proc = Processor(pq if pq else n)
        big_n, n2 = self.proc.n, self.proc.n2

        if big_n == 0 or pq == 0:
            self.g = self.p1nk1n = self.phim1 = self.km1 = 0
            self.phi = self.nm1 = self.rnd_n = self.rnd = 0
            return

        self.rnd = self.congruence_n(self.rnd)
        self.k = self.congruence_n(self.k)
        self.rnd_n = _powmod(self.rnd, big_n, n2)
        self.phi = wrap((self.p - 1) * (self.q - 1))

        if not is_prime(self.p):
            raise CompilerError("P is not prime")
        if not is_prime(self.q):
            raise CompilerError("Q is not prime")

        if self.rnd != 0 and invert(self.rnd_n, big_n) is None:
            raise CompilerError(f"Cannot invert seed: {self.rnd} ^N = {self.rnd_n}")

        phim1 = invert(self.phi, big_n)
        if phim1 is None:
            raise CompilerError("Cannot invert phi")
        self.phim1 = phim1

        km1 = invert(self.k, big_n)
        if km1 is None:
            raise CompilerError("Cannot invert k")
        self.km1 = km1

        self.g = wrap(1 + self.k * big_n)

        nm1 = invert(wrap(big_n - self.phi), self.phi)
        if nm1 is None:
            raise CompilerError("Cannot invert N")
        self.nm1 = nm1

        self.p1nk1n = _mulmod(self.phim1, self.km1, big_n)

        if self.bit_guard < 1 or self.bit_guard > _MAX_BIT_GUARD:
            raise CompilerError("Bit guard (u) must be greater than 0")

        if self.proc.beta < self.bit_guard:
            raise CompilerError(
                f"Small range: select other N which is not slightly above power of 2 "
                f"(beta={self.proc.beta} is smaller than bit guard {self.bit_guard}; "
                f"N2-A2={to_str(n2 - self.proc.a2)} must be well above N={big_n})"
            )

    def show(self) -> str:
        """Describe processor and key parameters."""
        return (
            f"{self.proc.show()}\n"
            f"Compiler: p={self.p} q={self.q} phi={self.phi} k={self.k}"
            f" g={self.g} Nm1={self.nm1} p1Nk1N={self.p1nk1n}"
            f" rnd={self.rnd} rndN={self.rnd_n}"
        )

    def random(self) -> int:
        """Advance the seed and return the next ``r**N`` value."""
        if self.rnd_n == 0:
            raise CompilerError("Rnd used, but not initialised: set random seed")
        self.rnd_n = _mulmod(self.rnd_n, self.rnd_n, self.proc.n2)
        return self.rnd_n

    def fkf(self) -> int:
        """The decryption exponent ``phi * phi**-1 * k**-1 * sneak``."""
        n2 = self.proc.n2
        if n2 == 0:
            return 0
        nphi = _mulmod(self.proc.n, self.phi, n2)
        pn = _mulmod(self.p1nk1n, self.sneak, n2)
        return _mulmod(self.phi, pn, nphi)

    def congruence_n(self, x: int) -> int:
        return congruence(x, self.proc.n)

    def congruence_n2(self, x: int) -> int:
        return congruence(x, self.proc.n2)

    def encrypt(self, x: int, r: int | None = None):
        """Encrypt ``x`` with the given ``r``, or with the next random value."""
        r_n = self.random() if r is None else _powmod(wrap(r), self.proc.n, self.proc.n2)
        n2 = self.proc.n2
        gm = _powmod(self.g, self.congruence_n(x), n2)
        return self.proc.x2cell(_mulmod(r_n, gm, n2))

    def _decrypt_m(self, cell) -> int:
        n, n2 = self.proc.n, self.proc.n2
        mp1 = _powmod(cell.x(), self.fkf(), n2)
        m = wrap(mp1 - 1)
        if n and m % n != 0:
            raise CompilerError(f"Bad encrypted value {cell.x()}")
        return m // n if n else 0

    def decrypt(self, cell) -> int:
        """Return the plain value held in an encrypted cell."""
        return self._decrypt_m(cell)

    def decrypt_with_r(self, cell) -> tuple[int, int]:
        """Return ``(m, r)``: the plain value and the randomness of the cell."""
        m = self._decrypt_m(cell)
        n, n2 = self.proc.n, self.proc.n2
        ax = cell.x()

        r = _powmod(self.g, congruence(wrap(n - m), n), n2)
        r = _mulmod(r, ax, n2)
        r = _powmod(r, self.nm1, n)

        r_n = _powmod(r, n, n2)
        y = _mulmod(_powmod(self.g, m, n2), r_n, n2)
        if ax != y:
            raise CompilerError(f"extract_rm - verification failed for {ax}")
        return m, r