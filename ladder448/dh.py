import hmac

from ladder448.elliptic import LOW_ORDER, SIZE, Key, fe, ladder_joye, ladder_montgomery
from ladder448.exceptions import InvalidKeyError, LowOrderPointError

# X448 key agreement (RFC 7748 section 6.2) on top of the raw ladders. This is
# where the clamping is done and where low order points are refused.


def _key(b, what: str) -> Key:
  if len(b) != SIZE:
    raise InvalidKeyError(f"Invalid {what}: should be exactly {SIZE} bytes, got {len(b)}")
  return Key(b)


def is_low_order(u) -> bool:
  """Check a u coordinate (reduced mod p) against all known low order points."""
  canonical = bytes(fe.from_bytes(u))
  # Not short-circuiting, every comparison is made
  found = False
  for lo in LOW_ORDER:
    found |= hmac.compare_digest(canonical, lo)
  return found


def public_key(secret) -> bytes:
  """X448 public key of a 56-byte secret, using the fixed base ladder."""
  k = _key(secret, "secret key").clamp()
  ladder_joye(k)
  return bytes(k)


def shared_secret(secret, public) -> bytes:
  """
  X448 shared secret of our secret key and the peer's public key.

  :raises LowOrderPointError: if the public key or the result is a low order point
  :raises InvalidKeyError: if either key has the wrong length
  """
  k = _key(secret, "secret key").clamp()
  pk = _key(public, "public key")
  bad = is_low_order(pk)
  ladder_montgomery(k, pk)
  # The result of any low order input is zero, but check for all of them anyway
  bad |= is_low_order(k)
  if bad:
    raise LowOrderPointError("Invalid public key provided (low order point)")
  return bytes(k)
