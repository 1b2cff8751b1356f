# cryptoleq

A library for Paillier-style encryption of integers. A value `m` is
encrypted as `r^N * g^m mod N^2`, where `N = p*q` and `g = 1 + k*N`. The
library also has the arithmetic building blocks that this rests on.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `cryptoleq.arith`

Fixed-width unsigned numbers are 4096 bits wide (`UNUMBER_BITS`). Plain
Python integers hold the values.

* `wrap(x)` reduces `x` into `[0, 2**4096)`. Negative values wrap
  around.
* `parse_decimal(s)` reads the decimal digits of `s` and skips any other
  characters.
* `to_str(x, base=10)` renders `x` in bases 2 to 36.

### `cryptoleq.euclid`

* `gcd(x, y)` returns the greatest common divisor.
* `invert(x, mod)` returns the inverse of `x` modulo `mod`. It returns
  `None` when there is no inverse, and raises `ValueError` when `mod` is
  below 1.

### `cryptoleq.factor`

* `is_prime(n)` makes a trial division by small primes, then a Fermat
  test with bases 2 up to `min(70, n-1)`.
* `factorize(n)` returns the prime factors in ascending order, with
  repeats.
* `factor_one(n)` returns one divisor. For a prime this is `n` itself,
  and for an even number it is `2`. Both use Pollard's rho method.

### `cryptoleq.cell`

Memory cells hold a value as `x = N*t + s + 1` modulo `N^2`. When `N` is
zero, the cell is in open mode: it holds a plain number and uses a fixed
half-width split. There are four representations:

* `CellTs` holds the `(t, s)` pair.
* `CellX` holds the raw `x`.
* `CellInv` carries a cell together with its inverse.
* `DoublePlug` holds both forms and checks them against each other.

All four support `ts()`, `x()`, `invert()`, `increment()`, `decrement()`,
`*` and `<`.

`make_cell(n, t, s)`, `cell_from_x(n, x)` and `minus_one(n)` build the
working cell type, which is `CellInv` over `CellX`. An impossible
operation raises `CellError`.

### `cryptoleq.processor`

* `Processor(n)` derives the range parameters of a modulus: `n2`, `a2`,
  `b2`, `beta` and the high bit positions.
* `leq(cell)` tells whether a cell holds zero or a negative value.
* `bam1(a, b)` computes `B - A`. On encrypted cells this is
  `A^-1 * B`; in open mode it is a plain subtraction.
* `batt(a, b)`, `cell_str(cell)`, `x2cell(x)` and `show()` are also
  available.
* `congruence(x, n)` reduces `x` by `n`.

Bad parameters raise `ProcessorError`.

### `cryptoleq.compiler`

`Compiler` holds the key material. You can set it up in two ways:

* `init_pqkru(n, p, q, k, rnd, bit_guard)` takes the values directly.
* `load_pqkru(path)` reads a file of five whitespace-separated decimal
  numbers, `p q k rnd u`.

It provides these methods:

* `encrypt(x, r=None)` encrypts `x`. Without `r`, it uses the next value
  from the seeded generator.
* `decrypt(cell)` returns the plain value.
* `decrypt_with_r(cell)` returns the pair `(m, r)`.
* `random()`, `fkf()`, `congruence_n(x)`, `congruence_n2(x)` and
  `show()` are also available.

Inconsistent keys or malformed ciphertexts raise `CompilerError`.

```python
from cryptoleq.compiler import Compiler

c = Compiler()
c.init_pqkru(0, 61, 53, 1, 7, 1)
cell = c.encrypt(5)
m, r = c.decrypt_with_r(cell)
assert m == 5
```

### `cryptoleq.utils`

* `make_unumber(value, default)` parses a number. An empty string gives
  `default`, and `"time"` gives the current clock.
* `print_char(c)` shows printable characters as they are and any other
  character as `\xNN`.
* `str2ts(s, n)` builds a cell from `"t"` or `"t.s"`.
* `file2str(path)`, `isfile(path)` and `cwd()` are also available.

## What this package does not do

The package installs no command-line programs. It offers no way to
encrypt or decrypt from a shell. It has no encrypted integer types with
comparison, equality or multiplication on ciphertexts. It has no private
lookup over an encrypted table, and no interactive calculator. Only the
library modules listed above are provided.