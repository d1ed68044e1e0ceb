import sys
from secrets import token_bytes
from time import perf_counter

from tqdm import tqdm

from ladder448 import dh
from ladder448.cli.tty import status
from ladder448.elliptic import G, SIZE


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise ValueError(f"Invalid number of rounds {args.rounds!r}")
  if rounds < 1:
    raise ValueError("The number of rounds must be positive")

  with status("Generating keys..."):
    keys = [token_bytes(SIZE) for i in range(rounds)]
    peer = dh.public_key(token_bytes(SIZE))

  results = {}
  for name, func in ("fixed base", dh.public_key), ("variable base", lambda sk: dh.shared_secret(sk, peer)):
    t0 = perf_counter()
    for sk in tqdm(keys, desc=f"{name:14}", delay=1.0, ncols=78, unit="mul", file=sys.stderr):
      func(sk)
    dur = perf_counter() - t0
    results[name] = dur
    print(f"{name:14} {rounds / dur:8.1f} mul/s  {dur / rounds * 1e3:8.2f} ms/mul")

  print(f"\nRan {rounds} multiplications of each kind, base point u={G.val}.")
  print(f"The fixed base ladder is {results['variable base'] / results['fixed base']:.2f}x the speed of the generic one.")
