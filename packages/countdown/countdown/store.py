"""Single-writer snapshot store with in-order delivery."""
from __future__ import annotations

from typing import Callable

from countdown.state import CountdownState

_Subscriber = Callable[[CountdownState], None]


class StateStore:
    """Holds the latest CountdownState and fans snapshots out to subscribers.

    ``publish`` queues the snapshot and drains the queue in order. A
    subscriber that publishes again while being notified (for example by
    issuing a command) has its snapshot delivered after the current one
    reaches every subscriber.
    """

    def __init__(self, initial: CountdownState) -> None:
        self._state = initial
        self._subscribers: list[_Subscriber] = []
        self._queue: list[CountdownState] = []
        self._delivering = False

    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, handler: _Subscriber, replay: bool = True) -> Callable[[], None]:
        """Register ``handler``. Returns a callable that unsubscribes it."""
        self._subscribers.append(handler)
        if replay:
            handler(self._state)
        return lambda: self.unsubscribe(handler)

    def unsubscribe(self, handler: _Subscriber) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    def publish(self, state: CountdownState) -> None:
        self._state = state
        self._queue.append(state)
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._queue:
                snapshot = self._queue.pop(0)
                for handler in list(self._subscribers):
                    handler(snapshot)
        finally:
            self._delivering = False
            self._queue.clear()
