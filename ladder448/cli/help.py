import sys
from typing import NoReturn

import ladder448

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  pub=f"{C}ladder448 {F}pub {N}secret {D}—{N} calculate the public key of a secret key\n",
  shared=f"{C}ladder448 {F}shared {N}secret public {D}—{N} calculate a Diffie-Hellman shared secret\n",
  bench=f"{C}ladder448 {F}bench {D}[{F}-n {N}200{D}] —{N} run a performance benchmark of both ladders\n",
)

usagetext = dict(
  pub=f"""\
The secret key is 56 bytes in hex (112 digits) and gets clamped before use,
so any 56 random bytes make a valid key. The public key is its product with
the Curve448 generator, calculated with the precomputed fixed base ladder.
Give {F}-{N} in place of the key to read it from stdin.
""",
  shared=f"""\
Multiplies the peer public key by your secret key using the Montgomery ladder.
Public keys of low order are refused since the result would be a fixed value
that anyone can guess. Give {F}-{N} in place of one key to read it from stdin.
""",
  bench=f"""\
  {F}-n --rounds{N} N      Number of multiplications of each kind (default 200)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Ladder448 {ladder448.__version__} - X448 scalar multiplication in plain Python"

introduction = f"""\
{T}{introduction:78}{N}
 💣  Not constant time, do not use for secrets on shared machines
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Keys are given and printed as hex in the little endian byte order of RFC 7748.

  {F}--debug{N}           Show tracebacks rather than short error messages
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

* Key exchange between Alice and Bob:
  - {C}ladder448 {F}pub {N}$ALICE_SK                  Alice's public key
  - {C}ladder448 {F}shared {N}$BOB_SK $ALICE_PK       Bob's view of the shared secret
  - {C}head -c 56 /dev/urandom | xxd -p -c 56 | ladder448 {F}pub -{N}
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Ladder448 {ladder448.__version__}")
  sys.exit(0)
