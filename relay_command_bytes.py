"""
Wire bytes for the Numato Lab 1 channel USB relay module (USBPOWRL002).

Protocol framing: <ASCII command>\\r
Where:
  - the command is a plain text line understood by the module firmware
  - every line is terminated by a single carriage return

The module does not need a reply to be read back.
"""

WAKE_UP = b"\r"
RELAY_ON = b"relay on 0\r"
RELAY_OFF = b"relay off 0\r"
