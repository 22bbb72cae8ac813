from __future__ import annotations

import logging

import pytest

from lib_log_fanout.application.use_cases.dispatch import ChannelRegistration, Dispatcher
from lib_log_fanout.application.use_cases.shutdown import create_shutdown
from lib_log_fanout.domain.levels import LogLevel


@pytest.fixture
def diagnostics() -> list[tuple[str, dict]]:
    return []


@pytest.fixture
def dispatcher(clock, diagnostics) -> Dispatcher:
    return Dispatcher(clock=clock, diagnostic=lambda name, payload: diagnostics.append((name, payload)))


@pytest.mark.parametrize("threshold", list(LogLevel))
def test_channel_receives_only_records_meeting_its_threshold(dispatcher: Dispatcher, channel_factory, threshold: LogLevel) -> None:
    channel = channel_factory()
    dispatcher.register(channel, threshold)

    for level in LogLevel:
        dispatcher.log(level, f"at {level.name}")

    received = [record.severity for record in channel.records]
    assert received == [level for level in LogLevel if level >= threshold]


def test_register_accepts_level_names(dispatcher: Dispatcher, channel_factory) -> None:
    registration = dispatcher.register(channel_factory(), "warning")
    assert registration.threshold is LogLevel.WARNING
    assert dispatcher.registrations == (registration,)


def test_registrations_keep_registration_order(dispatcher: Dispatcher, channel_factory) -> None:
    first, second, third = channel_factory("a"), channel_factory("b"), channel_factory("c")
    for channel in (first, second, third):
        dispatcher.register(channel, LogLevel.DEBUG)
    assert [registration.channel for registration in dispatcher.registrations] == [first, second, third]


def test_every_accepting_channel_gets_the_identical_record(dispatcher: Dispatcher, channel_factory) -> None:
    channels = [channel_factory(str(index)) for index in range(3)]
    for channel in channels:
        dispatcher.register(channel, LogLevel.INFO)

    dispatcher.log(LogLevel.ERROR, "shared")

    records = [channel.records[0] for channel in channels]
    assert all(record is records[0] for record in records)
    assert records[0].formatted == "[2025-09-23T12:00:00+00:00] app.ERROR: shared"


def test_accepts_is_evaluated_once_per_registration(
    dispatcher: Dispatcher, channel_factory, monkeypatch: pytest.MonkeyPatch
) -> None:
    evaluations: list[LogLevel] = []
    original = ChannelRegistration.accepts

    def counting_accepts(self: ChannelRegistration, severity: LogLevel) -> bool:
        evaluations.append(self.threshold)
        return original(self, severity)

    monkeypatch.setattr(ChannelRegistration, "accepts", counting_accepts)
    channels = [channel_factory(level.name) for level in LogLevel]
    for channel, level in zip(channels, LogLevel):
        dispatcher.register(channel, level)

    result = dispatcher.log(LogLevel.WARNING, "count me")

    assert len(evaluations) == len(channels)
    delivered = sum(len(channel.records) for channel in channels)
    assert delivered == 3
    assert result == {"ok": True, "delivered": 3, "failed": 0}


def test_same_channel_registered_twice_is_evaluated_independently(dispatcher: Dispatcher, channel_factory) -> None:
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)
    dispatcher.register(channel, LogLevel.ERROR)

    dispatcher.log(LogLevel.INFO, "once")
    dispatcher.log(LogLevel.ERROR, "twice")

    assert [record.message for record in channel.records] == ["once", "twice", "twice"]


def test_failing_channel_does_not_stop_later_channels(
    dispatcher: Dispatcher, channel_factory, failing_channel, diagnostics
) -> None:
    before = channel_factory("before")
    after = channel_factory("after")
    dispatcher.register(before, LogLevel.DEBUG)
    dispatcher.register(failing_channel, LogLevel.DEBUG)
    dispatcher.register(after, LogLevel.DEBUG)

    result = dispatcher.log(LogLevel.ERROR, "still delivered")

    assert failing_channel.attempts == 1
    assert [record.message for record in before.records] == ["still delivered"]
    assert [record.message for record in after.records] == ["still delivered"]
    assert result == {"ok": False, "delivered": 2, "failed": 1}
    name, payload = diagnostics[0]
    assert name == "channel_failed"
    assert payload["error"] == "RuntimeError"
    assert payload["description"] == "sink exploded"
    assert payload["channel"] == "FailingChannel"


def test_log_never_raises_even_when_every_channel_fails(dispatcher: Dispatcher, failing_channel) -> None:
    dispatcher.register(failing_channel, LogLevel.DEBUG)
    dispatcher.register(failing_channel, LogLevel.DEBUG)

    result = dispatcher.log(LogLevel.CRITICAL, "nobody listens")

    assert result["failed"] == 2
    assert failing_channel.attempts == 2


def test_channel_failures_are_written_to_the_diagnostic_logger(
    clock, failing_channel, caplog: pytest.LogCaptureFixture
) -> None:
    dispatcher = Dispatcher(clock=clock)
    dispatcher.register(failing_channel, LogLevel.DEBUG)

    with caplog.at_level(logging.ERROR, logger="lib_log_fanout.diagnostics"):
        dispatcher.log(LogLevel.ERROR, "boom")

    assert any("channel_failed" in message and "sink exploded" in message for message in caplog.messages)


def test_invalid_severity_is_reported_not_raised(dispatcher: Dispatcher, channel_factory, diagnostics) -> None:
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)

    result = dispatcher.log("verbose", "unknown level")

    assert result == {"ok": False, "delivered": 0, "failed": 0}
    assert channel.records == []
    assert diagnostics[0][0] == "record_failed"


def test_non_string_messages_are_rendered_with_str(dispatcher: Dispatcher, channel_factory) -> None:
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)

    dispatcher.log(LogLevel.INFO, {"order": 42})

    assert channel.records[0].message == "{'order': 42}"


def test_level_helpers_map_to_their_severity(dispatcher: Dispatcher, channel_factory) -> None:
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)

    dispatcher.debug("d")
    dispatcher.info("i")
    dispatcher.warn("w")
    dispatcher.warning("w2")
    dispatcher.error("e")
    dispatcher.critical("c")

    assert [record.severity for record in channel.records] == [
        LogLevel.DEBUG,
        LogLevel.INFO,
        LogLevel.WARNING,
        LogLevel.WARNING,
        LogLevel.ERROR,
        LogLevel.CRITICAL,
    ]


def test_timestamps_come_from_the_clock_in_order(dispatcher: Dispatcher, channel_factory) -> None:
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)

    dispatcher.info("first")
    dispatcher.info("second")

    first, second = channel.records
    assert first.timestamp < second.timestamp


def test_dispatcher_name_is_rendered_into_records(clock, channel_factory) -> None:
    dispatcher = Dispatcher(name="billing", clock=clock)
    channel = channel_factory()
    dispatcher.register(channel, LogLevel.DEBUG)

    dispatcher.info("invoice sent")

    assert channel.records[0].formatted.endswith("billing.INFO: invoice sent")


class _ClosableChannel:
    def __init__(self, fail: bool = False) -> None:
        self.closed = 0
        self.fail = fail

    def deliver(self, record) -> None:
        pass

    def close(self) -> None:
        self.closed += 1
        if self.fail:
            raise OSError("disk gone")


def test_close_closes_each_distinct_channel_once(dispatcher: Dispatcher, channel_factory) -> None:
    closable = _ClosableChannel()
    dispatcher.register(closable, LogLevel.DEBUG)
    dispatcher.register(closable, LogLevel.ERROR)
    dispatcher.register(channel_factory(), LogLevel.DEBUG)

    dispatcher.close()

    assert closable.closed == 1


def test_shutdown_reports_close_failures_and_continues() -> None:
    emitted: list[tuple[str, dict]] = []
    failing = _ClosableChannel(fail=True)
    healthy = _ClosableChannel()

    create_shutdown(channels=[failing, healthy], emit=lambda name, payload: emitted.append((name, payload)))()

    assert healthy.closed == 1
    assert emitted[0][0] == "close_failed"
    assert emitted[0][1]["description"] == "disk gone"


def test_dispatcher_requires_an_explicit_clock() -> None:
    with pytest.raises(TypeError):
        Dispatcher()  # type: ignore[call-arg]


def test_application_layer_does_not_import_adapters() -> None:
    import inspect

    from lib_log_fanout.application.use_cases import dispatch

    assert "lib_log_fanout.adapters" not in inspect.getsource(dispatch)
