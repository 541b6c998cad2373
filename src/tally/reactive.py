import logging
from typing import Any, Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any, Any, str], None]


@runtime_checkable
class ReactiveContainer(Protocol):
    """A single-value cell whose writes are observable by the host framework.

    Counters only ever read and write through this interface. Subscriptions,
    diffing and notifications are the container's business.
    """

    def get(self) -> Any: ...

    def set(self, value: Any) -> None: ...


class Ref:
    """
    Minimal observable cell, used by counters when no container is given.

    Subscribers are called synchronously after every write that changes the
    value, with the same signature as a watch method:

        def changed(value, old_value, attr):
            print(f"{attr} changed from {old_value} to {value}")

        ref = Ref(0, name="count")
        unsubscribe = ref.subscribe(changed)
        ref.value = 1  # count changed from 0 to 1

    Attributes:
        name (str): passed to subscribers as ``attr``.
    """

    def __init__(self, value: Any = None, name: str = "") -> None:
        self._value = value
        self._subscribers: list[Subscriber] = []
        self.name = name

    def get(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        old_value = self._value
        if value == old_value:
            return
        self._value = value
        for subscriber in list(self._subscribers):
            subscriber(value, old_value, self.name)

    value = property(get, set)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registers `callback` for changes and returns a function that removes
        it again."""
        if not callable(callback):
            raise TypeError("Ref subscribers must be callable")
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)
            else:
                logger.debug(f"Subscriber {callback!r} already removed from {self!r}")

        return unsubscribe

    def __repr__(self) -> str:
        if self.name:
            return f"<Ref {self.name}={self._value!r}>"
        return f"<Ref {self._value!r}>"
