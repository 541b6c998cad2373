class CounterError(Exception):
    pass


class InvalidRangeError(CounterError, ValueError):
    """The lower bound of a counter range is greater than its upper bound.

    Raised at construction time, so a counter never exists with a range that no
    value can satisfy. Can be disabled with the ``TALLY_VALIDATE_RANGE`` setting.
    """

    pass


class InvalidValueError(CounterError, ValueError):
    """A counter operation would store NaN, which no range can contain."""

    pass
