import logging
import math

from .conf import get_setting
from .exceptions import InvalidRangeError, InvalidValueError
from .reactive import ReactiveContainer, Ref
from .types import CounterRange

logger = logging.getLogger(__name__)

# marks "argument not given", as None is no number
empty = object()


class BoundedCounter:
    """
    A reactive number, kept inside an optional inclusive ``[min, max]`` range.

    The value itself lives in a reactive container, so every change is visible to
    whatever observes that container. Without an explicit container, a `Ref` is
    created.

    Example usage:
        counter = BoundedCounter(5, {"min": 0, "max": 10})
        counter.increment(20)  # 10
        counter.decrement()  # 9
        counter.reset()  # 5

    An initial value outside the range is stored as is: it is clamped with the
    first call of `increment`, `decrement`, `set` or `reset`. NaN is rejected with
    `InvalidValueError`, as it lies in no range.

    Args:
        initial_value (float): the starting value, and the first reset default.
        range (CounterRange): optional ``min``/``max`` bounds. Missing bounds are
            infinite.
        container (ReactiveContainer): the cell holding the value.

    Attributes:
        min (float): the lower bound, ``-inf`` if unbounded.
        max (float): the upper bound, ``inf`` if unbounded.
        default_value (float): what reset() without argument goes back to.
        container (ReactiveContainer): the cell holding the value.
    """

    def __init__(
        self,
        initial_value: float = 0,
        range: CounterRange | None = None,
        *,
        container: ReactiveContainer | None = None,
    ) -> None:
        range = range or {}
        lower = range.get("min")
        upper = range.get("max")
        self._min = -math.inf if lower is None else lower
        self._max = math.inf if upper is None else upper

        if self._min > self._max:
            if get_setting("TALLY_VALIDATE_RANGE"):
                raise InvalidRangeError(
                    f"Counter range minimum ({self._min}) is greater than its "
                    f"maximum ({self._max})."
                )
            logger.warning(
                f"Counter created with inverted range [{self._min}, {self._max}]"
            )

        if isinstance(initial_value, float) and math.isnan(initial_value):
            raise InvalidValueError("Counters cannot hold NaN.")

        if container is None:
            container = Ref(initial_value)
        else:
            container.set(initial_value)
        self._container = container
        self._default_value = initial_value

    @property
    def value(self):
        return self._container.get()

    def get(self):
        return self._container.get()

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def default_value(self):
        """The value a reset without argument goes back to."""
        return self._default_value

    @property
    def container(self) -> ReactiveContainer:
        return self._container

    def _store(self, candidate, value):
        if isinstance(candidate, float) and math.isnan(candidate):
            raise InvalidValueError("Counters cannot hold NaN.")
        if value != candidate:
            logger.debug(f"Counter value {candidate} clamped to {value}")
        self._container.set(value)
        return value

    def _clamp(self, value):
        # upper bound first; decrement applies the bounds the other way round
        return max(min(value, self._max), self._min)

    def increment(self, delta=empty):
        """Adds `delta` (the TALLY_DEFAULT_STEP setting if omitted) and returns
        the new value. Negative deltas count down."""
        if delta is empty:
            delta = get_setting("TALLY_DEFAULT_STEP")
        candidate = self.value + delta
        return self._store(candidate, self._clamp(candidate))

    def decrement(self, delta=empty):
        """Subtracts `delta` (the TALLY_DEFAULT_STEP setting if omitted) and
        returns the new value. Negative deltas count up."""
        if delta is empty:
            delta = get_setting("TALLY_DEFAULT_STEP")
        candidate = self.value - delta
        return self._store(candidate, min(max(candidate, self._min), self._max))

    def set(self, val):
        return self._store(val, self._clamp(val))

    def reset(self, val=empty):
        """Sets the counter back to its default value.

        If `val` is given, it becomes the new default: later calls of reset()
        without argument go back to `val`, not to the initial value.
        """
        if val is empty:
            val = self._default_value
        value = self._store(val, self._clamp(val))
        self._default_value = val
        return value

    def __repr__(self) -> str:
        return f"<BoundedCounter {self.value!r} in [{self._min}, {self._max}]>"


def use_counter(
    initial_value: float = 0,
    range: CounterRange | None = None,
    *,
    container: ReactiveContainer | None = None,
) -> BoundedCounter:
    """Creates a bounded counter, hook style.

    Example usage:
        count = use_counter(0, {"min": 0, "max": 3})
        count.increment()
    """
    return BoundedCounter(initial_value, range, container=container)
