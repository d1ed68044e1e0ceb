import sys
from contextlib import contextmanager


@contextmanager
def status(message):
  """Write a temporary status message that is cleared once processing is complete."""
  if sys.stderr.isatty():
    sys.stderr.write(message)

    sys.stderr.flush()
    try:
      yield
    finally:
      sys.stderr.write("\r\x1B[0K")
      sys.stderr.flush()
  else:
    yield
