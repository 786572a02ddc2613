# Plain Python Montgomery ladder for Curve25519 and other Montgomery curves

# Scalar multiplication using only X coordinates, with points kept as
# projective ratios (x, z) until an affine X is needed.
# https://datatracker.ietf.org/doc/html/rfc7748

# Not constant time, not zeroing buffers after use, so libsodium or similar
# should be preferred for actual key agreement. This is for computations that
# those libraries do not expose (unclamped scalars, custom curves, ratios).

# Public symbols are imported here. Curve parameters default to Curve25519
# everywhere and other curves are given as the curve argument.

__version__ = "0.1.0"

from .curve import CURVE448, CURVE25519, Curve
from .exceptions import InfinityError, NotInvertibleError
from .field import F448, F25519, Field, inverse_of, p448, p25519, reduce, square
from .mont import Ratio, affine, cswap, ladder_step, point_add1, point_double, point_mult, ratio_equal
from .util import clamp, decode_scalar, decode_u, tobytes, toint
from .xdh import scalarmult, scalarmult_base, x448, x25519
