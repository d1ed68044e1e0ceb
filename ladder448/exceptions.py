class InvalidKeyError(ValueError):
  """Key string is malformed or of the wrong length"""

class LowOrderPointError(ValueError):
  """Key exchange with a low order point, the result would not be secret"""
