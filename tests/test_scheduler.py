from __future__ import annotations
from datetime import datetime

from billboi.services.scheduler import DailyScheduler, next_run_at


def test_next_run_at_same_day_and_next_day():
    assert next_run_at(datetime(2024, 3, 1, 6, 30), 7, 0) == datetime(2024, 3, 1, 7, 0)
    assert next_run_at(datetime(2024, 3, 1, 7, 0), 7, 0) == datetime(2024, 3, 2, 7, 0)
    assert next_run_at(datetime(2024, 12, 31, 23, 59), 7, 0) == datetime(2025, 1, 1, 7, 0)


def test_scheduler_start_and_stop():
    scheduler = DailyScheduler(7, 0, lambda: None, clock=lambda: datetime(2024, 3, 1, 8, 0))

    fire_at = scheduler.start()
    assert fire_at == datetime(2024, 3, 2, 7, 0)
    assert scheduler.running

    scheduler.stop()
    assert not scheduler.running


def test_scheduler_fire_runs_callback_and_rearms():
    fired: list[int] = []

    def boom():
        fired.append(1)
        raise RuntimeError("printer on fire")

    scheduler = DailyScheduler(7, 0, boom, clock=lambda: datetime(2024, 3, 1, 7, 0, 1))
    scheduler.start()
    try:
        scheduler._fire()
        assert fired == [1]
        assert scheduler.running
    finally:
        scheduler.stop()
