import pytest
import serial


class FakeSerialDevice:
    """Stands in for serial.Serial; every session appends to a shared log."""

    def __init__(self):
        self.writes: list[bytes] = []
        self.sessions: list["FakeSerialSession"] = []
        self.missing_paths: set[str] = set()
        self.zero_write = False

    def __call__(self, port, baudrate=9600, **kwargs):
        if port in self.missing_paths:
            raise serial.SerialException(2, f"could not open port {port}: [Errno 2] No such file or directory")
        session = FakeSerialSession(self, port, baudrate, kwargs)
        self.sessions.append(session)
        return session


class FakeSerialSession:
    def __init__(self, device, port, baudrate, kwargs):
        self.device = device
        self.port = port
        self.baudrate = baudrate
        self.kwargs = kwargs
        self.is_open = True

    def write(self, data):
        if self.device.zero_write:
            return 0
        self.device.writes.append(bytes(data))
        return len(data)

    def close(self):
        self.is_open = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def fake_serial(monkeypatch):
    device = FakeSerialDevice()
    monkeypatch.setattr(serial, "Serial", device)
    return device
