from typing import Tuple

from .curve import CURVE25519, Curve
from .exceptions import InfinityError

# Points are given only by their X coordinate, and in intermediate steps as
# a projective ratio (x, z) such that X = x / z. Ratio z = 0 is the point at
# infinity. Ratios are equal if x1 * z2 == x2 * z1, plain tuple comparison
# does not work because (x, z) and (c * x, c * z) are the same point.

Ratio = Tuple[int, int]


def affine(x: int, z: int, curve: Curve = CURVE25519) -> int:
  """
  Collapse the ratio x / z into an X coordinate.

  :raises InfinityError: if z is zero mod p
  """
  F = curve.field
  if F.reduce(z) == 0:
    raise InfinityError(f"{curve.name} point at infinity does not have an X coordinate")
  return F.mul(x, F.inverse_of(z))


def ratio_equal(P: Ratio, Q: Ratio, curve: Curve = CURVE25519) -> bool:
  """Compare two ratios by cross-multiplication. (0, 0) equals nothing."""
  F = curve.field
  (x1, z1), (x2, z2) = P, Q
  if F.reduce(x1) == F.reduce(z1) == 0 or F.reduce(x2) == F.reduce(z2) == 0:
    return False
  return F.mul(x1, z2) == F.mul(x2, z1)


def point_double(x: int, z: int, curve: Curve = CURVE25519) -> Ratio:
  """
  Double the point P at X = x / z

      X_2n = (X_n + Z_n)^2 (X_n - Z_n)^2
      Z_2n = (4 X_n Z_n) ((X_n - Z_n)^2 + ((A + 2) / 4) (4 X_n Z_n))

  Doubling the point at infinity gives z = 0 again.
  """
  F = curve.field
  s, d = F.square(x + z), F.square(x - z)
  xz4 = F.mul(4 * x, z)
  return F.mul(s, d), F.mul(xz4, d + F.mul(curve.a24_double, xz4))


def point_add1(x: int, z: int, prev_x: int, prev_z: int, curve: Curve = CURVE25519) -> Ratio:
  """
  Given ratios for nP and (n - 1)P, with P the base point, calculate (n + 1)P

      X_n+1 = Z_n-1 ((X_n - Z_n)(X_1 + Z_1) + (X_n + Z_n)(X_1 - Z_1))^2
      Z_n+1 = X_n-1 ((X_n - Z_n)(X_1 + Z_1) - (X_n + Z_n)(X_1 - Z_1))^2

  (n - 1)P is the difference of the two points being added, so it must not be
  the point at infinity (n = 1 gives a meaningless X = 0).
  """
  F = curve.field
  base_x, base_z = curve.base_x, 1
  xa = F.mul(x - z, base_x + base_z)
  xb = F.mul(x + z, base_x - base_z)
  return F.mul(prev_z, F.square(xa + xb)), F.mul(prev_x, F.square(xa - xb))


def cswap(swap: int, a: int, b: int) -> Tuple[int, int]:
  """Conditional swap, not constant time (neither are Python ints)"""
  return (b, a) if swap else (a, b)


def ladder_step(x2: int, z2: int, x3: int, z3: int, x1: int, a24: int, curve: Curve = CURVE25519):
  """Montgomery ladder step: replaces (P2, P3) by (2 P2, P2 + P3), where P3 - P2 = P1"""
  F = curve.field
  a, b = x2 + z2, x2 - z2
  aa, bb = F.square(a), F.square(b)
  e = aa - bb
  c, d = x3 + z3, x3 - z3
  da, cb = F.mul(d, a), F.mul(c, b)
  x3, z3 = F.square(da + cb), F.mul(x1, F.square(da - cb))
  x2, z2 = F.mul(aa, bb), F.mul(e, aa + F.mul(a24, e))
  return x2, z2, x3, z3


def point_mult(X: int, n: int, curve: Curve = CURVE25519) -> Ratio:
  """
  Multiply the point at X coordinate X by scalar n, giving nP as a ratio.

  Always runs curve.bits ladder steps, whatever the magnitude of n. Only the
  low curve.bits bits of n are used, any clamping is up to the caller.

  :raises TypeError: if X or n is not an int
  :raises ValueError: if n is negative
  """
  if not isinstance(n, int):
    raise TypeError(f"Scalar must be an int, got {n!r}")
  if n < 0:
    raise ValueError("Scalar must not be negative")
  x1 = curve.field.reduce(X)
  a24 = curve.a24_ladder
  # In projective coordinates, to avoid divisions: X = x / z
  x2, z2 = 1, 0    # "zero" point
  x3, z3 = x1, 1   # "one" point
  swap = 0
  for t in reversed(range(curve.bits)):
    bit = n >> t & 1
    swap ^= bit
    x2, x3 = cswap(swap, x2, x3)
    z2, z3 = cswap(swap, z2, z3)
    swap = bit  # anticipates one last swap after the loop
    x2, z2, x3, z3 = ladder_step(x2, z2, x3, z3, x1, a24, curve)

  # last swap is necessary to compensate for the xor trick
  x2, x3 = cswap(swap, x2, x3)
  z2, z3 = cswap(swap, z2, z3)
  return x2, z2
