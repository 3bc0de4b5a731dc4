"""Tests for the single-slot deferred focus/scroll request holder."""

from __future__ import annotations

from search import FieldKey, FocusIntent, PendingIntent, ScrollIntent

from conftest import RecordingSink


def test_flush_delivers_and_empties_slot() -> None:
    pending = PendingIntent()
    sink = RecordingSink()
    key = FieldKey("autoridade")
    pending.schedule(FocusIntent(key))

    assert pending.flush(sink) == FocusIntent(key)
    assert sink.calls == [("focus", key)]
    assert pending.pending is None
    assert pending.flush(sink) is None
    assert sink.calls == [("focus", key)]


def test_last_writer_wins() -> None:
    pending = PendingIntent()
    sink = RecordingSink()
    first = FieldKey("autoridade")
    second = FieldKey("orgaoJudicial", "r1")
    pending.schedule(FocusIntent(first))
    pending.schedule(ScrollIntent(second, 3))

    pending.flush(sink)

    assert sink.calls == [("scroll", second, 3)]
