from __future__ import annotations

from functools import cached_property
from typing import Tuple

# Field prime (Goldilocks)
p = 2**448 - 2**224 - 1

# Field elements are stored as 56 little endian bytes
SIZE = 56

# Precalculate commonly needed parts of the prime
p2 = (p - 1) // 2
p14 = (p + 1) // 4

# Mask covering every bit of a field element, used for branch-free selection
MASK = (1 << 8 * SIZE) - 1


class fe:
  """A prime field scalar modulo p = 2^448 - 2^224 - 1"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(SIZE, 'little')
  def bit(self, n: int): return bool(self.val & 1 << n)

  @staticmethod
  def from_bytes(b) -> fe:
    """Read 56 little endian bytes, reducing values that are not below p"""
    if len(b) != SIZE: raise ValueError(f"Should be exactly {SIZE} bytes")
    return fe(int.from_bytes(b, 'little'))

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else self * o.inv

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe:
    """Inverse by Fermat's little theorem, x^(p-2). The inverse of zero is zero."""
    return fe(pow(self.val, p - 2, p))

  # Legendre symbol:
  # -  0 if n is zero
  # -  1 if n is a non-zero square
  # - -1 if n is not a square
  @cached_property
  def chi(self) -> fe:
    """Legendre symbol"""
    return self**p2

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  @cached_property
  def is_square(self) -> bool: return self == zero or self.chi == one

  @cached_property
  def sqrt(self) -> fe:
    """The square root. Raises ValueError if there is none."""
    if not self.is_square: raise ValueError('Not a square!')
    # p is congruent to 3 modulo 4, so one exponentiation finds the root
    root = self**p14
    assert root.sq == self
    return root if root.val <= p2 else -root


zero, one, minus1 = fe(0), fe(1), fe(-1)


def cswap(a: fe, b: fe, bit: int) -> Tuple[fe, fe]:
  """Swap a and b if bit is 1, selecting by masks rather than branching."""
  t = -bit & MASK & (a.val ^ b.val)
  return fe(a.val ^ t), fe(b.val ^ t)

def cmov(a: fe, b: fe, bit: int) -> fe:
  """Return b if bit is 1, otherwise a."""
  return fe(a.val ^ -bit & MASK & (a.val ^ b.val))

def addsub(a: fe, b: fe) -> Tuple[fe, fe]:
  return a + b, a - b


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
