import pytest

from skalog.dispatch import LogAsync, LogPayload, LogSync
from skalog.entry import LogContext, LogEntry, LogLevel


class Recorder:
    def __init__(self):
        self.entries = []

    def consume_now(self, entry):
        self.entries.append(entry)


def make_entry(text):
    entry = LogEntry(None, LogContext(LogLevel.INFO))
    entry << text
    return entry


def test_payload_runs_action():
    calls = []
    LogPayload(action=lambda: calls.append(1))()
    assert calls == [1]


def test_payload_consumes_entry():
    recorder = Recorder()
    entry = make_entry("abc")
    LogPayload(entry=entry, logger=recorder)()
    assert recorder.entries == [entry]


def test_payload_requires_work():
    with pytest.raises(ValueError):
        LogPayload()


def test_payload_entry_requires_logger():
    with pytest.raises(ValueError):
        LogPayload(entry=make_entry("abc"))


def test_sync_consumes_same_entry():
    recorder = Recorder()
    entry = make_entry("abc")
    method = LogSync()
    method.log(entry, recorder)
    method.terminate()
    assert recorder.entries[0] is entry


def test_async_consumes_copy_after_terminate():
    recorder = Recorder()
    entry = make_entry("abc")
    method = LogAsync()
    method.log(entry, recorder)
    entry << "more"
    method.terminate()
    assert len(recorder.entries) == 1
    assert recorder.entries[0] is not entry
    assert recorder.entries[0].message == "abc"


def test_async_keeps_order():
    recorder = Recorder()
    method = LogAsync()
    for text in ["one", "two", "three"]:
        method.log(make_entry(text), recorder)
    method.terminate()
    assert [e.message for e in recorder.entries] == ["one", "two", "three"]