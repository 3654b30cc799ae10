"""Thread-safe record of which side currently owns the gateway."""

import threading
from enum import Enum


class GateStatus(str, Enum):
    """Who is currently using the gateway."""

    IDLE = "idle"
    GATEIN = "gatein"
    MODEMIN = "modemin"
    MESSAGEIN = "messagein"

    def __str__(self) -> str:
        return self.value


class GateState:
    """Holds the gateway's current status behind a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current = GateStatus.IDLE

    @property
    def state(self) -> GateStatus:
        """The current status."""
        with self._lock:
            return self._current

    def idle(self) -> None:
        """Return to the idle status."""
        self.set_state(GateStatus.IDLE)

    def set_state(self, new_state: GateStatus) -> None:
        """Set the status unconditionally."""
        new_state = GateStatus(new_state)
        with self._lock:
            self._current = new_state

    def set_state_only_if_idle(self, new_state: GateStatus) -> bool:
        """Set the status if currently idle; report whether it was set."""
        new_state = GateStatus(new_state)
        with self._lock:
            if self._current is GateStatus.IDLE:
                self._current = new_state
                return True
            return False

    def try_state(self, new_state: GateStatus) -> bool:
        """Claim a status: succeeds if already held or if currently idle."""
        new_state = GateStatus(new_state)
        with self._lock:
            if self._current is new_state:
                return True
            if self._current is GateStatus.IDLE:
                self._current = new_state
                return True
            return False