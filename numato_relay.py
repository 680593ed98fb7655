"""
USB Relay Module Controller for the Numato Lab 1 channel USB relay
(USBPOWRL002, idVendor=2a19, idProduct=0c05).

Usage:
  numato-relay -d /dev/ttyACM0 -c pulse      (Linux)
  numato-relay -d /dev/ttyS4 -c pulse        (WSL)

To allow non-root access on Linux, add a udev rule such as
/etc/udev/rules.d/70-numato.rules:

  ACTION=="add", KERNEL=="ttyACM[0-9]*", ATTRS{idVendor}=="2a19", ATTRS{idProduct}=="0c05", MODE="0666"
"""
import os
import sys
from datetime import datetime

from domain.invocation import UsageError, parse_invocation
from pipeline.relay_dispatcher import DispatchState, RelayDispatcher
from protocol.command_registry import InvalidCommandError, parse_command
from transport.remote_reset import perform_remote_reset

BANNER = "USB Relay Module Controller - USBPOWRL002"


# ---------------------------------------------------------------------------
# Simple console logger
# ---------------------------------------------------------------------------
def log(msg: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def usage(progname: str) -> None:
    print("Usage", file=sys.stderr)
    print(f"{progname} -d device -c command", file=sys.stderr)
    print("Where:", file=sys.stderr)
    print("\ttype device name, Ex.: /dev/ttyACM0", file=sys.stderr)
    print('\ttype command, Ex.: "pulse" or "on" and "off"', file=sys.stderr)


def main(argv: list[str] | None = None, *, dispatcher_factory=RelayDispatcher, reset_fn=perform_remote_reset) -> int:
    if argv is None:
        argv = sys.argv
    progname = os.path.basename(argv[0]) if argv else "numato-relay"

    try:
        request = parse_invocation(argv[1:], on_unknown_flag=lambda _flag: usage(progname))
    except UsageError as e:
        log(str(e))
        usage(progname)
        return 1

    log(BANNER)

    # Reject unknown commands before the device is ever opened.
    try:
        command = parse_command(request.command)
    except InvalidCommandError as e:
        log(str(e))
        usage(progname)
        return 1

    dispatcher = dispatcher_factory(request.device_path, log_fn=log)
    state = dispatcher.run(command)
    if state is not DispatchState.DONE:
        return 1

    if request.remote_reset:
        reset_fn(log_fn=log)

    return 0


if __name__ == "__main__":
    sys.exit(main())
