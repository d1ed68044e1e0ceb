from typing import Union

from .field import SIZE

# Scalars use every bit of the 56 bytes
BITS = 8 * SIZE


class Key(bytearray):
  """
  A 56-byte little endian X448 scalar or u coordinate.

  The buffer is mutable because the ladders write their result back into the
  scalar they were given. Any other length is refused.
  """

  def __init__(self, data=bytes(SIZE)):
    if len(data) != SIZE: raise ValueError(f"Key should be exactly {SIZE} bytes, got {len(data)}")
    super().__init__(data)

  def __repr__(self):
    return f"Key[{self.hex()[:8]}]"

  def clamp(self) -> "Key":
    """Apply X448 clamping in place"""
    self[0] &= 252
    self[SIZE - 1] |= 128
    return self


def clamp(x: int) -> int:
  """X448 standard clamping for scalars"""
  # 448 bits 1[x]00  (using 445 bits of x, masking on/off others)

  # Clearing the two low bits makes the scalar a multiple of the cofactor 4, so
  # multiplying a point with a low order component never exposes scalar bits.
  return x & (1 << BITS) - 4 | 1 << BITS - 1


def toint(x: Union[int, bytes, bytearray]) -> int:
  if isinstance(x, int): return x
  if len(x) != SIZE: raise ValueError(f"Should be exactly {SIZE} bytes")
  return int.from_bytes(x, "little")

def tobytes(x: int) -> bytes:
  return x.to_bytes(SIZE, "little")
