from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class SchedulerPort(ABC):
    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        """Run `callback` once, no earlier than `delay_seconds` from now, on the UI thread."""
        raise NotImplementedError
