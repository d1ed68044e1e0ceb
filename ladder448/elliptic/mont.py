from typing import Tuple

from .field import addsub, cmov, cswap, fe

# Curve448 constants on Montgomery curve: v2 = u3 + A u2 + u
A = fe(156326)
a24 = fe(39082)  # = (A + 2) / 4

# The point at infinity has no affine coordinates. In projective (X : Z) form it
# is any (X : 0), and converting it to affine gives zero by the zero inverse
# convention, so that it cannot be told apart from the order 2 point (0, 0).


def v(u: fe) -> fe:
  """Calculate the v coordinate for a point, checking point validity as well."""
  v2 = u**3 + A * u.sq + u
  if v2.is_square: return v2.sqrt
  raise ValueError(f"Curve448 {u=} is not a valid point (it is on the twist)")

def is_on_curve(u: fe) -> bool:
  """True for points of Curve448, False for points of its quadratic twist"""
  return (u**3 + A * u.sq + u).is_square


def double(x: fe, z: fe) -> Tuple[fe, fe]:
  """Point doubling in projective coordinates (X : Z)"""
  a, b = addsub(x, z)
  aa, bb = a.sq, b.sq
  e = aa - bb
  return aa * bb, e * (bb + a24 * e)


def diff_add(mu: fe, x1: fe, z1: fe, x2: fe, z2: fe, b: int) -> Tuple[fe, fe, fe, fe]:
  """
  Joye's ladder step: (x1, z1) += T, with (x2, z2) as the difference.

  The precomputed point T is given as mu = (u + 1) / (u - 1) of its affine u.
  The two running points are swapped first if b is 1, and the result is
  returned in the same (x1, z1, x2, z2) order.
  """
  x1, x2 = cswap(x1, x2, b)
  z1, z2 = cswap(z1, z2, b)
  x1, z1 = addsub(x1, z1)
  z1 = z1 * mu
  x1, z1 = addsub(x1, z1)
  return x1.sq * z2, z1.sq * x2, x2, z2


def ladder_step(x1: fe, x2: fe, z2: fe, x3: fe, z3: fe, b: int) -> Tuple[fe, fe, fe, fe]:
  """
  Montgomery ladder step: replaces (P2, P3) by (2 * P, P2 + P3).

  P is P2 if b is 0 and P3 if b is 1. The affine x1 is the u coordinate of the
  difference P3 - P2 which stays constant through the ladder.
  """
  x2, z2 = addsub(x2, z2)
  x3, z3 = addsub(x3, z3)
  # Differential addition
  da, cb = addsub(x2 * z3, x3 * z2)
  # Pick the point to double without branching
  x2 = cmov(x2, x3, b)
  z2 = cmov(z2, z3, b)
  x3, z3 = da.sq, x1 * cb.sq
  # Doubling, with x2 and z2 already holding X + Z and X - Z
  aa, bb = x2.sq, z2.sq
  e = aa - bb
  return aa * bb, e * (bb + a24 * e), x3, z3
