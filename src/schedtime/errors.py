"""Exceptions raised for invalid calendar input.

All of them derive from ValueError so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class InvalidPattern(ValueError):
    """Format pattern could not be compiled."""


class InvalidArgument(ValueError):
    """Required argument is absent or of the wrong kind."""


class UnknownTimezone(ValueError):
    """Timezone identifier is not known to the timezone database."""
