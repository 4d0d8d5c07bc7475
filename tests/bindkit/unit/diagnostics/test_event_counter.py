from __future__ import annotations

import logging

import orjson

from bindkit.diagnostics import DiagnosticHub, EventCounter, log_diagnostics_summary


def test_counter_tallies_events_by_name_while_attached() -> None:
    hub = DiagnosticHub(capacity=8)
    counter = EventCounter()
    hub.emit_fast(category="fps", name="fps.sample")

    counter.attach(hub)
    for name in ("fps.sample", "surface.resize", "fps.sample"):
        hub.emit_fast(category="runtime", name=name)
    counter.detach()
    hub.emit_fast(category="fps", name="fps.sample")

    assert counter.counts() == {"fps.sample": 2, "surface.resize": 1}
    assert not counter.attached


def test_summary_warns_when_callbacks_failed(caplog) -> None:
    hub = DiagnosticHub(capacity=8)
    counter = EventCounter()
    counter.attach(hub)
    hub.emit_fast(category="controls", name="controls.callback_failed", level="error")
    logger = logging.getLogger("bindkit.test.summary")

    with caplog.at_level(logging.INFO, logger="bindkit.test.summary"):
        counts = log_diagnostics_summary(counter, logger)

    assert counts == {"controls.callback_failed": 1}
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert orjson.loads(record.getMessage().partition("counts=")[2]) == counts
    assert not counter.attached


def test_summary_of_quiet_run_logs_info(caplog) -> None:
    counter = EventCounter()
    logger = logging.getLogger("bindkit.test.summary")
    with caplog.at_level(logging.INFO, logger="bindkit.test.summary"):
        assert log_diagnostics_summary(counter, logger) == {}
    assert caplog.records[-1].levelno == logging.INFO
