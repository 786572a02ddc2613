from functools import lru_cache
from typing import NamedTuple

from .field import F448, F25519, Field

# Montgomery curve: B v2 = u3 + A u2 + u, with B = 1 for all curves here.
# Only the u (aka X) coordinate is used by the ladder arithmetic.


@lru_cache(maxsize=None)
def quarter(field: Field, v: int) -> int:
  """v / 4 in the field"""
  return field.mul(v, field.inverse_of(4))


class Curve(NamedTuple):
  """Immutable parameters of a Montgomery curve"""
  name: str
  A: int
  field: Field
  base_x: int
  cofactor: int

  def __repr__(self): return f"Curve({self.name})"

  # Two different constants go by the name a24, they are not interchangeable.
  # Division by 4 is done in the field so that any A works.

  @property
  def a24_double(self) -> int:
    """(A + 2) / 4, used by point doubling"""
    return quarter(self.field, self.A + 2)

  @property
  def a24_ladder(self) -> int:
    """(A - 2) / 4, used by the combined ladder step"""
    return quarter(self.field, self.A - 2)

  @property
  def bits(self) -> int:
    """Number of scalar bits processed by the ladder"""
    return self.field.bits

  @property
  def nbytes(self) -> int: return self.field.nbytes


CURVE25519 = Curve("Curve25519", 486662, F25519, 9, 8)
CURVE448 = Curve("Curve448", 156326, F448, 5, 4)
