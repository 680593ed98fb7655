import time
from enum import Enum

import relay_command_bytes as WIRE
from protocol.command_registry import (
    InvalidCommandError,
    RelayCommand,
    command_payloads,
    parse_command,
)
from transport.serial_interface import DeviceError, write_sequence


# Pause after the wake byte so the module command parser settles.
WAKE_SETTLE_SECONDS = 50e-6
PULSE_HOLD_SECONDS = 1


class DispatchState(Enum):
    IDLE = "idle"
    WAKING_UP = "waking_up"
    DISPATCHING = "dispatching"
    ACTIVATING = "activating"
    DEACTIVATING = "deactivating"
    PULSING_ON = "pulsing_on"
    PULSING_OFF = "pulsing_off"
    DONE = "done"
    FAILED = "failed"



class RelayDispatcher:
    """
    Drives one relay invocation: wake the module, then send the payload(s).

    - Every write opens and closes its own session (see write_sequence).
    - Any failure is terminal; nothing is retried.
    """

    def __init__(
        self,
        device_path: str,
        *,
        write_fn=write_sequence,
        sleep_fn=time.sleep,
        log_fn=print,
    ):
        self.device_path = device_path
        self.write_fn = write_fn
        self.sleep_fn = sleep_fn
        self.log_fn = log_fn
        self.state = DispatchState.IDLE
        self.history = [DispatchState.IDLE]
        self.error: Exception | None = None

    def _enter(self, state: DispatchState) -> None:
        self.state = state
        self.history.append(state)

    def _fail(self, exc: Exception) -> DispatchState:
        self.error = exc
        self.log_fn(str(exc))
        self._enter(DispatchState.FAILED)
        return self.state

    def _send(self, data: bytes) -> None:
        self.write_fn(self.device_path, data, log_fn=self.log_fn)

    def run(self, command) -> DispatchState:
        if self.state is not DispatchState.IDLE:
            raise RuntimeError(f"Dispatcher already used (state={self.state.value})")

        self._enter(DispatchState.WAKING_UP)
        self.log_fn("let's wake up interface")
        try:
            self._send(WIRE.WAKE_UP)
        except DeviceError as e:
            return self._fail(e)
        self.sleep_fn(WAKE_SETTLE_SECONDS)

        self._enter(DispatchState.DISPATCHING)
        try:
            relay_command = parse_command(command)
        except InvalidCommandError as e:
            return self._fail(e)

        try:
            if relay_command is RelayCommand.ACTIVATE:
                self._activate(DispatchState.ACTIVATING, command_payloads(relay_command)[0])
            elif relay_command is RelayCommand.DEACTIVATE:
                self._deactivate(DispatchState.DEACTIVATING, command_payloads(relay_command)[0])
            else:
                on_bytes, off_bytes = command_payloads(relay_command)
                self._activate(DispatchState.PULSING_ON, on_bytes)
                self.sleep_fn(PULSE_HOLD_SECONDS)
                self._deactivate(DispatchState.PULSING_OFF, off_bytes)
        except DeviceError as e:
            return self._fail(e)

        self._enter(DispatchState.DONE)
        return self.state

    def _activate(self, state: DispatchState, payload: bytes) -> None:
        self._enter(state)
        self.log_fn("let's activate relay")
        self._send(payload)

    def _deactivate(self, state: DispatchState, payload: bytes) -> None:
        self._enter(state)
        self.log_fn("let's deactivate relay")
        self._send(payload)
