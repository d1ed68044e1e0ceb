from .field import fe, minus1, one, zero
from .mont import double
from .util import BITS

# Generator (u = 5)
G = fe(5)

# Point of order 4 on Curve448 (u = -1) that the fixed base ladder starts from
S = minus1

# The other starting point of the fixed base ladder, u coordinate of G - S
G_MINUS_S = fe.from_bytes(bytes.fromhex(
  "20279dc97d19b1acf8ba691cff33ac23511bce3a6465bdf123f8c1849d455429"
  "67b9811c03d1cdda7bebff1a8803cf3a4244320125b7faf0"
))

# Bits of the scalar that the fixed base ladder skips (cleared by clamping) and
# that are restored by doublings after the ladder
H = 2

# Points of low order on Curve448 and its twist:
#  - (0, 0) is of order 2 on Curve448
#  - (1, _) is of order 4 on the twist
#  - (-1, _) is of order 4 on Curve448
LOW_ORDER = tuple(bytes(u) for u in (zero, one, minus1))


def generator_table() -> tuple:
  """
  Precompute mu_s = (u_s + 1) / (u_s - 1) for s in 0..445 where u_s is the
  affine u coordinate of 2^s * G. Joye's ladder adds 2^s * G on step s.
  """
  table = []
  x, z = G, one
  for s in range(BITS - H):
    u = x / z
    table.append((u + one) / (u - one))
    x, z = double(x, z)
  return tuple(table)

# Built once at import and only ever read afterwards
TABLE = generator_table()
