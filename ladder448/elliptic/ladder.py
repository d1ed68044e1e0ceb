# X448 scalar multiplication ladders

# Both ladders run a fixed number of steps and select their operands by masking
# instead of branching on scalar bits. Note that Python integers are not
# constant time, so this is no defense against a local timing attacker. The
# scalars must be clamped beforehand: the ladders rely on bit 447 being set and
# the two lowest bits being clear to end with the result in the right place.

from .field import fe, one, zero
from .mont import diff_add, double, ladder_step
from .table import G_MINUS_S, H, S, TABLE
from .util import BITS, Key, clamp, tobytes, toint


def ladder_joye(k: Key) -> None:
  """
  Fixed base multiplication k * G, replacing k with the result.

  Right-to-left ladder from M. Joye, "How to precompute a ladder", SAC 2017.
  """
  # Running points (x1 : z1) and (x2 : z2), whose sum is 2^s * G on step s
  x1, z1 = S, one
  x2, z2 = G_MINUS_S, one
  swap = 1
  for s in range(BITS - H):
    i, j = divmod(s + H, 8)
    bit = k[i] >> j & 1
    x1, z1, x2, z2 = diff_add(TABLE[s], x1, z1, x2, z2, swap ^ bit)
    swap = bit
  # Multiply by 2^H to restore the skipped bits, which also cancels S (order 4)
  for _ in range(H):
    x1, z1 = double(x1, z1)
  to_affine(k, x1, z1)


def ladder_montgomery(k: Key, xp: Key) -> None:
  """Variable base multiplication k * P, replacing k with the u coordinate of the result."""
  u = fe.from_bytes(xp)
  # In projective coordinates, to avoid divisions: u = X / Z
  x2, z2 = one, zero  # "zero" point
  x3, z3 = u, one     # "one" point
  move = 0
  for s in reversed(range(BITS)):
    i, j = divmod(s, 8)
    bit = k[i] >> j & 1
    x2, z2, x3, z3 = ladder_step(u, x2, z2, x3, z3, move ^ bit)
    move = bit
  to_affine(k, x2, z2)


def to_affine(out: bytearray, x: fe, z: fe) -> None:
  """Write the affine u == X / Z into out as 56 canonical bytes."""
  out[:] = bytes(x * z.inv)


def scalarmult(s: int, u: fe) -> fe:
  """Multiply point u coordinate by clamped scalar s in Curve448"""
  k = Key(tobytes(clamp(toint(s))))
  ladder_montgomery(k, Key(bytes(u)))
  return fe.from_bytes(k)

def scalarmult_base(s: int) -> fe:
  """Multiply the generator by clamped scalar s using the precomputed table"""
  k = Key(tobytes(clamp(toint(s))))
  ladder_joye(k)
  return fe.from_bytes(k)
