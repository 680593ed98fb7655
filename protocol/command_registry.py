from enum import Enum

import relay_command_bytes as WIRE


class InvalidCommandError(ValueError):
    """Raised when a command name is not one of on/off/pulse."""

    def __init__(self, value: str):
        super().__init__(f'Error: invalid command argument "{value}"')
        self.value = value


class RelayCommand(Enum):
    ACTIVATE = "on"
    DEACTIVATE = "off"
    PULSE = "pulse"


# Pulse holds the relay closed between its two payloads.
COMMAND_PAYLOADS: dict[RelayCommand, tuple[bytes, ...]] = {
    RelayCommand.ACTIVATE: (WIRE.RELAY_ON,),
    RelayCommand.DEACTIVATE: (WIRE.RELAY_OFF,),
    RelayCommand.PULSE: (WIRE.RELAY_ON, WIRE.RELAY_OFF),
}


def parse_command(value) -> RelayCommand:
    """
    Case-sensitive exact match against the command names.
    "On" or " on" are rejected.
    """
    if isinstance(value, RelayCommand):
        return value
    if not isinstance(value, str):
        raise InvalidCommandError(str(value))
    for command in RelayCommand:
        if command.value == value:
            return command
    raise InvalidCommandError(value)


def is_supported_command(value: str) -> bool:
    try:
        parse_command(value)
    except InvalidCommandError:
        return False
    return True


def command_payloads(command: RelayCommand) -> tuple[bytes, ...]:
    return COMMAND_PAYLOADS[command]
