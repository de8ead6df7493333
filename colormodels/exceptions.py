class ColorModelError(Exception):
    """
    Base class for every error raised by colormodels
    """
    pass


class PreconditionError(ColorModelError, ValueError):
    """
    Thrown when a color is built or modified from invalid data
    """
    pass


class ChannelRangeError(PreconditionError):
    """
    Thrown when a channel, alpha or opacity value lies outside its native range
    """
    pass


class ChannelCountError(PreconditionError):
    """
    Thrown when a list of channel values has the wrong length for its color space
    """
    pass


class InvalidHexError(PreconditionError):
    """
    Thrown when a hex string is not 3 or 6 hexadecimal digits with an optional leading '#'
    """
    pass
