from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_fanout.domain.alerts import DeliveryResult, OutgoingAlert
from lib_log_fanout.domain.levels import LogLevel
from lib_log_fanout.domain.records import LogRecord

_MANAGED_ENV = (
    "LOG_NAME",
    "LOG_CONSOLE_LEVEL",
    "LOG_FILE_PATH",
    "LOG_FILE_LEVEL",
    "LOG_ENABLE_ALERTS",
    "LOG_ALERT_LEVEL",
    "LOG_ALERT_MAX_CHARS",
    "LOG_ALERT_TIMEOUT",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_FANOUT_USE_DOTENV",
    "MESSAGEBIRD_API_KEY",
    "MESSAGEBIRD_ORIGINATOR",
    "MESSAGEBIRD_RECIPIENTS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``LOG_*``/``MESSAGEBIRD_*`` variables out of every test."""

    for variable in _MANAGED_ENV:
        monkeypatch.delenv(variable, raising=False)


class SteppingClock:
    """Clock returning a fixed start time advanced by one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        value = self.current
        self.current = value + timedelta(seconds=1)
        return value


class RecordingChannel:
    """Channel remembering every record it receives."""

    def __init__(self, name: str = "recorder") -> None:
        self.name = name
        self.records: list[LogRecord] = []

    def deliver(self, record: LogRecord) -> None:
        self.records.append(record)


class FailingChannel:
    """Channel whose delivery always raises."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("sink exploded")
        self.attempts = 0

    def deliver(self, record: LogRecord) -> None:
        self.attempts += 1
        raise self.exc


class FakeNotifier:
    """Notifier recording outgoing alerts and answering with ``result``."""

    def __init__(self, result: DeliveryResult | None = None, exc: Exception | None = None) -> None:
        self.result = result or DeliveryResult.success(reference="msg-1")
        self.exc = exc
        self.sent: list[OutgoingAlert] = []
        self.closed = False

    def send(self, message: OutgoingAlert) -> DeliveryResult:
        self.sent.append(message)
        if self.exc is not None:
            raise self.exc
        return self.result

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def make_record():
    def _make(message: str = "hello", level: LogLevel = LogLevel.ERROR) -> LogRecord:
        return LogRecord.create(level, message, datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc))

    return _make


@pytest.fixture
def channel_factory() -> type[RecordingChannel]:
    return RecordingChannel


@pytest.fixture
def failing_channel() -> FailingChannel:
    return FailingChannel()


@pytest.fixture
def notifier_factory() -> type[FakeNotifier]:
    return FakeNotifier


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()
