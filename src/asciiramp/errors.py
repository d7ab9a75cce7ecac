class AsciiRampError(Exception):
    """Base class for errors raised by asciiramp."""


class InvalidGridSpec(AsciiRampError, ValueError):
    """The requested grid cannot be laid over the image.

    Raised for a grid dimension below 1, or for a grid finer than the source
    resolution, which would leave every tile with zero area.
    """
