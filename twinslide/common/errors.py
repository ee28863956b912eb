"""Exception types shared across twinslide"""


class TwinslideError(Exception):
    """Base class for twinslide errors"""


class OptionValueError(TwinslideError, ValueError):
    """An option value is out of its allowed range"""


class SessionStateError(TwinslideError, RuntimeError):
    """A lifecycle transition was requested from the wrong state"""


class FrontendLoadError(TwinslideError):
    """The configured frontend module could not be loaded"""
