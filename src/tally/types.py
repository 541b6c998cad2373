from typing import TypedDict


class CounterRange(TypedDict, total=False):
    min: float | None
    max: float | None
