from .curve import CURVE25519, Curve


def clamp(k: int, curve: Curve = CURVE25519) -> int:
  """RFC 7748 clamping of a secret scalar"""
  # Curve25519: 255 bits 01[k]000, equal to k & (1 << 255) - 8 | 1 << 254
  # Curve448:   448 bits 1[k]00
  # Clamped scalars are multiples of the cofactor, so that multiplying a point
  # outside of the prime group does not expose any low bits of the scalar.
  low = curve.cofactor - 1
  top = 1 << curve.bits - 1
  return k & (top << 1) - 1 & ~low | top


def toint(b, nbytes: int = 32) -> int:
  if isinstance(b, int): return b
  if len(b) != nbytes: raise ValueError(f"Should be exactly {nbytes} bytes")
  return int.from_bytes(b, "little")

def tobytes(v: int, nbytes: int = 32) -> bytes:
  return v.to_bytes(nbytes, "little")


def decode_u(b, curve: Curve = CURVE25519) -> int:
  """Decode a u coordinate, ignoring any bits above the field size (the high bit on Curve25519)."""
  return toint(b, curve.nbytes) & (1 << curve.bits) - 1

def decode_scalar(b, curve: Curve = CURVE25519) -> int:
  return clamp(toint(b, curve.nbytes), curve)
