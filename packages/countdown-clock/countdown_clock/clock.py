"""Virtual millisecond clock."""


class Clock:
    def __init__(self, start_ms: int = 0) -> None:
        if start_ms < 0:
            raise ValueError("start_ms must be >= 0")
        self._now_ms = start_ms

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError(f"cannot advance by a negative amount, got {ms}")
        self._now_ms += ms
        return self._now_ms

    def advance_to(self, now_ms: int) -> int:
        if now_ms < self._now_ms:
            raise ValueError(
                f"clock cannot move backwards: {now_ms} < {self._now_ms}"
            )
        self._now_ms = now_ms
        return self._now_ms

    def reset(self, now_ms: int = 0) -> None:
        if now_ms < 0:
            raise ValueError("now_ms must be >= 0")
        self._now_ms = now_ms
