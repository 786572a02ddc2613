from functools import cached_property

from .exceptions import NotInvertibleError

# Field primes
p25519 = 2**255 - 19
p448 = 2**448 - 2**224 - 1


class Field:
  """Arithmetic modulo an odd prime p, on plain Python ints"""
  def __init__(self, p: int):
    # Primality of p is trusted, not checked
    if not isinstance(p, int) or p < 3 or not p & 1:
      raise ValueError(f"Field modulus must be an odd integer above 2, got {p!r}")
    self.p = p

  def __repr__(self): return f"Field({self.p:#x})"
  def __eq__(self, other): return isinstance(other, Field) and self.p == other.p
  def __hash__(self): return hash(self.p)

  @cached_property
  def bits(self) -> int: return self.p.bit_length()

  @cached_property
  def nbytes(self) -> int: return (self.bits + 7) // 8

  def reduce(self, v: int) -> int:
    """Canonical representative of v in [0, p), for any int including negatives."""
    if not isinstance(v, int):
      raise TypeError(f"Field elements are ints, got {v!r}")
    return v % self.p

  def square(self, v: int) -> int:
    return self.reduce(v * v)

  def mul(self, a: int, b: int) -> int:
    return self.reduce(a * b)

  def inverse_of(self, v: int) -> int:
    """
    Multiplicative inverse mod p.

    :raises NotInvertibleError: if v is a multiple of p
    """
    v = self.reduce(v)
    if v == 0: raise NotInvertibleError("Zero has no inverse mod p")
    return pow(v, -1, self.p)


F25519 = Field(p25519)
F448 = Field(p448)

# Curve25519 field as plain functions
reduce, square, inverse_of = F25519.reduce, F25519.square, F25519.inverse_of
