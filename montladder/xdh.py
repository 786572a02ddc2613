# The X25519 and X448 functions of RFC 7748, on 32 and 56 byte strings
# https://datatracker.ietf.org/doc/html/rfc7748#section-5

# Unlike the RFC, a result at infinity is not encoded as all zero bytes but
# raises InfinityError. The RFC asks callers to check for the all-zero output
# and abort, which happens here when a low order point is given.

from .curve import CURVE448, CURVE25519, Curve
from .mont import affine, point_mult
from .util import decode_scalar, decode_u, tobytes


def scalarmult(k, u, curve: Curve = CURVE25519) -> bytes:
  """
  Multiply the point u by the clamped secret k, both as bytes (or ints).

  :raises InfinityError: if the result is the point at infinity (low order u)
  """
  n = decode_scalar(k, curve)
  x, z = point_mult(decode_u(u, curve), n, curve)
  return tobytes(affine(x, z, curve), curve.nbytes)

def scalarmult_base(k, curve: Curve = CURVE25519) -> bytes:
  """Public key for secret k"""
  return scalarmult(k, curve.base_x, curve)


def x25519(k, u) -> bytes:
  return scalarmult(k, u, CURVE25519)

def x448(k, u) -> bytes:
  return scalarmult(k, u, CURVE448)
