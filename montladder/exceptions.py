class InfinityError(ValueError):
  """The point at infinity has no affine X-coordinate"""

class NotInvertibleError(ValueError):
  """Zero has no multiplicative inverse in the field"""
