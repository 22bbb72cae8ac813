from __future__ import annotations

from pathlib import Path

from lib_log_fanout.adapters.file import FileChannel
from lib_log_fanout.domain.levels import LogLevel


def test_file_channel_appends_one_line_per_record(tmp_path: Path, make_record) -> None:
    target = tmp_path / "logs" / "app.log"
    channel = FileChannel(target)
    first = make_record("first", LogLevel.INFO)
    second = make_record("second", LogLevel.ERROR)

    channel.deliver(first)
    channel.deliver(second)
    channel.close()

    assert target.read_text(encoding="utf-8").splitlines() == [first.formatted, second.formatted]


def test_file_channel_opens_lazily(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "app.log"
    FileChannel(target)
    assert not target.parent.exists()


def test_file_channel_keeps_existing_content(tmp_path: Path, make_record) -> None:
    target = tmp_path / "app.log"
    target.write_text("earlier\n", encoding="utf-8")
    channel = FileChannel(target)

    channel.deliver(make_record("later"))
    channel.close()

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "earlier"
    assert lines[1].endswith("app.ERROR: later")


def test_file_channel_reopens_after_close(tmp_path: Path, make_record) -> None:
    target = tmp_path / "app.log"
    channel = FileChannel(target)
    channel.deliver(make_record("one"))
    channel.close()
    channel.close()
    channel.deliver(make_record("two"))
    channel.close()

    assert len(target.read_text(encoding="utf-8").splitlines()) == 2


def test_file_channel_repr_names_the_path(tmp_path: Path) -> None:
    channel = FileChannel(tmp_path / "app.log")
    assert "app.log" in repr(channel)
    assert channel.path == tmp_path / "app.log"
