"""Timer-driven, cancellable playback of a code string.

The player is a small state machine: IDLE -> PLAYING (at `index`) -> STOPPED.
Each step keys the tone for a dot or dash through `on_tone` and schedules
the next step after the symbol's duration plus one time unit. Binding
`on_tone` to a sound device is up to the caller.
"""

import asyncio
import logging
from typing import Callable, Protocol

from morsewave.synthesize import TIME_UNIT_SECONDS, TONE_SYMBOLS
from morsewave.table import duration_units
from morsewave.types import PlaybackState

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


class Player:
    """Play one code string symbol by symbol.

    Args:
        code: Code string; `_` is played as a dash.
        on_tone: Called with the tone length in seconds for each dot/dash.
        schedule: `schedule(delay, callback)` returning a cancellable handle.
            Defaults to the running asyncio loop's `call_later`.
        time_unit: Seconds per time unit.
    """

    def __init__(
        self,
        code: str,
        on_tone: Callable[[float], None],
        schedule: Scheduler | None = None,
        time_unit: float = TIME_UNIT_SECONDS,
    ):
        self.code = code.replace("_", "-")
        self.on_tone = on_tone
        self.time_unit = time_unit
        self.state = PlaybackState.IDLE
        self.index: int | None = None
        self._schedule = schedule
        self._pending: TimerHandle | None = None
        self._stop_callbacks: list[Callable[[], None]] = []

    def add_stop_callback(self, callback: Callable[[], None]) -> None:
        self._stop_callbacks.append(callback)

    def start(self) -> None:
        if self.state is not PlaybackState.IDLE:
            raise RuntimeError(f"Cannot start a player that is {self.state.value}")
        if self._schedule is None:
            self._schedule = asyncio.get_running_loop().call_later

        if not self.code:
            self._finish()
            return

        self.state = PlaybackState.PLAYING
        self.index = 0
        self._play_current()

    def stop(self) -> None:
        """Cancel the pending step and force STOPPED."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._finish()

    def _play_current(self) -> None:
        symbol = self.code[self.index]
        duration = duration_units(symbol) * self.time_unit
        if symbol in TONE_SYMBOLS:
            self.on_tone(duration)
        logger.debug(f"Symbol {self.index} {symbol!r}: {duration:.3f}s")
        self._pending = self._schedule(duration + self.time_unit, self._advance)

    def _advance(self) -> None:
        self._pending = None
        if self.state is not PlaybackState.PLAYING:
            return
        if self.index + 1 >= len(self.code):
            self._finish()
            return
        self.index += 1
        self._play_current()

    def _finish(self) -> None:
        if self.state is PlaybackState.STOPPED:
            return
        self.state = PlaybackState.STOPPED
        for callback in self._stop_callbacks:
            callback()


async def play(
    code: str,
    on_tone: Callable[[float], None],
    time_unit: float = TIME_UNIT_SECONDS,
) -> None:
    """Play a code string on the running loop; return once it has finished.

    Cancelling the coroutine stops the player.
    """
    loop = asyncio.get_running_loop()
    done = loop.create_future()

    def _resolve() -> None:
        if not done.done():
            done.set_result(None)

    player = Player(code, on_tone, schedule=loop.call_later, time_unit=time_unit)
    player.add_stop_callback(_resolve)
    player.start()
    try:
        await done
    except asyncio.CancelledError:
        player.stop()
        raise
