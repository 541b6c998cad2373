"""Reactive, bounded numeric counters for Django projects"""

from .counter import BoundedCounter, use_counter
from .reactive import ReactiveContainer, Ref
from .types import CounterRange

__all__ = ["BoundedCounter", "use_counter", "ReactiveContainer", "Ref", "CounterRange"]
__version__ = "0.1.0"
__version_info__ = tuple([int(num) for num in __version__.split(".")])
