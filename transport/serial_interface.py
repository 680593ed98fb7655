import serial


DEFAULT_BAUDRATE = 9600
DEFAULT_WRITE_TIMEOUT = None


class DeviceError(RuntimeError):
    """Base class for failures talking to the relay device."""


class DeviceOpenError(DeviceError):
    def __init__(self, device_path: str, reason: str):
        super().__init__(f"Error opening device: {device_path} - {reason}")
        self.device_path = device_path
        self.reason = reason


class DeviceWriteError(DeviceError):
    def __init__(self, device_path: str, reason: str | None = None):
        message = "Error: Unable to write to the specified device"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.device_path = device_path
        self.reason = reason


def _open_reason(exc: Exception) -> str:
    # pyserial keeps the OS error text in strerror when it wraps an errno
    strerror = getattr(exc, "strerror", None)
    return str(strerror) if strerror else str(exc)


def write_sequence(
    device_path: str,
    data: bytes,
    *,
    log_fn=None,
    baudrate: int = DEFAULT_BAUDRATE,
    timeout: float | None = DEFAULT_WRITE_TIMEOUT,
    serial_factory=None,
) -> int:
    """
    Open the device, write one byte sequence and close it again.

    A fresh session is opened per call; the handle is released on every path.
    Nothing is read back from the module.

    Returns:
        Number of bytes written.

    Raises:
        DeviceOpenError if the device cannot be opened
        DeviceWriteError if the write reports zero bytes or fails
    """
    try:
        ser = (serial_factory or serial.Serial)(device_path, baudrate, write_timeout=timeout)
    except (serial.SerialException, OSError) as e:
        raise DeviceOpenError(device_path, _open_reason(e)) from e

    with ser:
        if log_fn:
            log_fn(f"TX -> {bytes(data)!r}")
        try:
            written = ser.write(data)
        except serial.SerialException as e:
            raise DeviceWriteError(device_path, str(e)) from e

        if not written:
            raise DeviceWriteError(device_path)

    return written
