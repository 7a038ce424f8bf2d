"""Custom exceptions for heading_outline."""


class HeadingOutlineError(Exception):
    """Base exception for heading_outline operations."""


class LevelRangeError(HeadingOutlineError):
    """Heading level bounds are outside 1-6 or inverted."""


class InputError(HeadingOutlineError):
    """Markup input could not be read."""
