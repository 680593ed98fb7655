from dataclasses import dataclass


FLAG_PREFIXES = ("-", "/")


class UsageError(ValueError):
    """Raised when the command line cannot produce an invocation."""


@dataclass(frozen=True)
class InvocationRequest:
    device_path: str
    command: str
    remote_reset: bool = False


def _take_value(argv: list[str], i: int) -> str:
    if i + 1 >= len(argv):
        raise UsageError(f"Error: missing value for flag {argv[i]}")
    return argv[i + 1]


def parse_invocation(argv: list[str], *, on_unknown_flag=None) -> InvocationRequest:
    """
    Scan flags the way the relay tool always accepted them:

      -d <device> / /d <device>   (letter is case-insensitive)
      -c <command> / /c <command>
      -r                          opt in to the remote reset call

    Unknown flag letters call on_unknown_flag (usually prints usage) and
    scanning continues. A bare positional argument is fatal.
    """
    device_path = None
    command = None
    remote_reset = False

    i = 0
    while i < len(argv):
        arg = argv[i]
        if not arg or arg[0] not in FLAG_PREFIXES:
            raise UsageError(f"Error: unexpected argument {arg!r}")

        letter = arg[1:2].lower()
        if letter == "d":
            device_path = _take_value(argv, i)
            i += 1
        elif letter == "c":
            command = _take_value(argv, i)
            i += 1
        elif letter == "r":
            remote_reset = True
        elif on_unknown_flag:
            on_unknown_flag(arg)
        i += 1

    if not device_path or not command:
        raise UsageError("Error: both a device (-d) and a command (-c) are required")

    return InvocationRequest(device_path=device_path, command=command, remote_reset=remote_reset)
