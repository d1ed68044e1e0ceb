# A plain Python submodule for Curve448 math (X448 of RFC 7748)
# https://datatracker.ietf.org/doc/html/rfc7748

# The ladders follow the fixed base and variable base algorithms of Cloudflare's
# CIRCL library: Joye's right-to-left ladder over a table of precomputed powers
# of two times the generator, and the classic Montgomery ladder.

# Operands are selected by masking rather than by branching on secret bits, and
# the loop lengths are fixed, but Python integer arithmetic itself is not
# constant time. Prefer a native library where timing side channels matter.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are field elements, upper case are u coordinates or tables.

from . import mont
from .field import fe, minus1, one, p, zero
from .ladder import ladder_joye, ladder_montgomery, scalarmult, scalarmult_base, to_affine
from .table import G, G_MINUS_S, LOW_ORDER, S, TABLE
from .util import BITS, SIZE, Key, clamp, tobytes, toint
