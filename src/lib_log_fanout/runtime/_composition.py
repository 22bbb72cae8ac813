"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`LoggingRuntime`. The
default wiring is the usual web deployment: a stderr console channel at
DEBUG, an optional ``app.log`` style file channel at INFO, and the SMS alert
channel at ERROR, registered in that order.

System Role
-----------
Anchors the clean-architecture boundary: concrete adapters are chosen here,
while :mod:`lib_log_fanout.runtime` exposes only the façade.
"""

from __future__ import annotations

from lib_log_fanout.adapters import AlertChannel, FileChannel, MonotonicClock, RichConsoleChannel
from lib_log_fanout.application.ports import ChannelPort, ClockPort, NotifierPort
from lib_log_fanout.application.use_cases.dispatch import Dispatcher

from ._settings import RuntimeSettings
from ._state import LoggingRuntime


def build_runtime(
    settings: RuntimeSettings,
    *,
    console: ChannelPort | None = None,
    notifier: NotifierPort | None = None,
    clock: ClockPort | None = None,
) -> LoggingRuntime:
    """Assemble the dispatcher and its channels from resolved settings.

    ``console``, ``notifier`` and ``clock`` let hosts and tests replace the
    default adapters without touching the wiring.
    """

    dispatcher = Dispatcher(
        name=settings.name,
        clock=clock or MonotonicClock(),
        diagnostic=settings.diagnostic_hook,
    )
    dispatcher.register(console or _create_console(settings), settings.console_level)
    if settings.file_path is not None:
        dispatcher.register(FileChannel(settings.file_path), settings.file_level)
    if settings.alert is not None:
        alert_channel = AlertChannel(settings.alert, notifier=notifier, diagnostic=settings.diagnostic_hook)
        dispatcher.register(alert_channel, settings.alert_level)
    return LoggingRuntime(dispatcher=dispatcher, settings=settings)


def _create_console(settings: RuntimeSettings) -> RichConsoleChannel:
    return RichConsoleChannel(force_color=settings.force_color, no_color=settings.no_color)


__all__ = ["build_runtime"]
