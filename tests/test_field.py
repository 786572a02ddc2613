from secrets import randbelow

import pytest

from montladder import *


def test_field():
  assert reduce(-1) == p25519 - 1
  assert reduce(p25519) == 0
  assert reduce(2 * p25519 + 9) == 9
  assert square(p25519 - 1) == 1
  assert F25519.mul(-2, 3) == p25519 - 6
  assert repr(F25519) == f"Field({p25519:#x})"
  assert F25519 == Field(2**255 - 19)
  assert F25519 != F448

  assert F25519.bits == 255 and F25519.nbytes == 32
  assert F448.bits == 448 and F448.nbytes == 56

  x = randbelow(p25519 - 1) + 1
  assert F25519.mul(x, inverse_of(x)) == 1
  assert inverse_of(inverse_of(x)) == x
  assert inverse_of(x + p25519) == inverse_of(x)
  assert square(x) == F25519.mul(x, x)

def test_field_errors():
  with pytest.raises(NotInvertibleError):
    inverse_of(0)
  with pytest.raises(NotInvertibleError):
    inverse_of(p25519)
  with pytest.raises(NotInvertibleError):
    F448.inverse_of(-p448)

  with pytest.raises(TypeError):
    reduce(1.0)
  with pytest.raises(TypeError):
    reduce("9")

  for p in (0, 1, 4, 2**255):
    with pytest.raises(ValueError) as exc:
      Field(p)
    assert "must be an odd integer above 2" in str(exc.value)
  # Only oddness is checked, primality is up to the caller
  assert Field(9).p == 9


def test_curve():
  assert CURVE25519.a24_double == 121666
  assert CURVE25519.a24_ladder == 121665
  assert CURVE448.a24_double == 39082
  assert CURVE448.a24_ladder == 39081
  assert CURVE25519.bits == 255 and CURVE25519.nbytes == 32
  assert CURVE448.bits == 448 and CURVE448.nbytes == 56
  assert repr(CURVE25519) == "Curve(Curve25519)"

  with pytest.raises(AttributeError):
    CURVE25519.A = 1  # type: ignore

  # A that is not 2 mod 4 still gives exact constants in the field
  toy = Curve("toy", 3, Field(101), 2, 4)
  assert toy.field.mul(4, toy.a24_double) == 5
  assert toy.field.mul(4, toy.a24_ladder) == 1


def test_curve_constants_cached():
  from montladder.curve import quarter
  quarter.cache_clear()
  for _ in range(3):
    assert CURVE25519.a24_double == 121666
  point_double(9, 1)
  point_mult(9, 3)
  info = quarter.cache_info()
  assert info.misses == 2  # a24_double and a24_ladder
  assert info.hits == 3
