import json

import tracking
from tracking import runtime


def test_package_exports_only_the_counter():
    assert tracking.__all__ == ["t"]


def test_t_persists_counts_when_enabled(tmp_path, monkeypatch):
    counts_file = tmp_path / "counts" / "calls.json"
    monkeypatch.setattr(runtime, "_ENABLED", True)
    monkeypatch.setattr(runtime, "_TRACKING_FILE", counts_file)
    monkeypatch.setattr(runtime, "_COUNTS", {})

    runtime.t("bookings.submission.BookingSubmissionOrchestrator.submit")
    runtime.t("bookings.submission.BookingSubmissionOrchestrator.submit")
    runtime.t("")

    saved = json.loads(counts_file.read_text(encoding="utf-8"))
    assert saved == {"bookings.submission.BookingSubmissionOrchestrator.submit": 2}


def test_t_writes_nothing_when_disabled(tmp_path, monkeypatch):
    counts_file = tmp_path / "calls.json"
    monkeypatch.setattr(runtime, "_ENABLED", False)
    monkeypatch.setattr(runtime, "_TRACKING_FILE", counts_file)
    monkeypatch.setattr(runtime, "_COUNTS", {})

    runtime.t("scripts.tools.main")

    assert not counts_file.exists()
    assert runtime._COUNTS == {}
