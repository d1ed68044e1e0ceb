import sys

from ladder448 import dh
from ladder448.elliptic import SIZE
from ladder448.exceptions import InvalidKeyError


def decode_hex(keystr: str, what: str) -> bytes:
  """Parse a hex key argument, with - reading a line from stdin."""
  if keystr == '-':
    keystr = sys.stdin.readline()
  keystr = keystr.strip()
  try:
    keybytes = bytes.fromhex(keystr)
  except ValueError:
    raise InvalidKeyError(f"Unable to parse {what} {keystr!r}, hex expected")
  if len(keybytes) != SIZE:
    raise InvalidKeyError(f"Invalid {what}: should be {2 * SIZE} hex digits, got {len(keystr)}")
  return keybytes


def positional(args, n: int):
  if len(args.files) != n:
    raise ValueError(f"Argument error, {n} key{'s' if n > 1 else ''} should be specified")
  if args.files.count('-') > 1:
    raise ValueError("Argument error, only one key can be read from stdin")
  return args.files


def main_pub(args):
  secret, = positional(args, 1)
  pk = dh.public_key(decode_hex(secret, "secret key"))
  print(pk.hex())


def main_shared(args):
  secret, public = positional(args, 2)
  sk = decode_hex(secret, "secret key")
  pk = decode_hex(public, "public key")
  print(dh.shared_secret(sk, pk).hex())
