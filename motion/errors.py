"""
Exceptions raised by the kinematic engine
"""


class MotionError(Exception):
    """Base class for simulator errors"""


class InvalidParameterError(MotionError, ValueError):
    """A parameter is non-finite, outside its domain, or otherwise unusable"""


class InvalidStateError(MotionError, RuntimeError):
    """An operation is not allowed in the engine's current state"""
