from __future__ import annotations
import threading
from datetime import datetime, timedelta
from typing import Callable

from billboi.core.logging import get_logger

logger = get_logger()


def next_run_at(now: datetime, hour: int, minute: int) -> datetime:
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return target


class DailyScheduler:
    """Fires ``callback`` once a day at ``hour:minute`` local time on a daemon timer thread."""

    def __init__(self, hour: int, minute: int, callback: Callable[[], object], clock: Callable[[], datetime] = datetime.now):
        self.hour = hour
        self.minute = minute
        self.callback = callback
        self.clock = clock
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._stopped = False

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self) -> datetime:
        with self._lock:
            self._stopped = False
            return self._arm()

    def stop(self) -> None:
        with self._lock:
            self._stopped = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _arm(self) -> datetime:
        now = self.clock()
        fire_at = next_run_at(now, self.hour, self.minute)
        if self._timer is not None:
            self._timer.cancel()
        self._timer = threading.Timer((fire_at - now).total_seconds(), self._fire)
        self._timer.daemon = True
        self._timer.start()
        logger.info("daily_job_scheduled", at=fire_at.isoformat(timespec="minutes"))
        return fire_at

    def _fire(self) -> None:
        logger.info("daily_job_fired", at=self.clock().isoformat(timespec="seconds"))
        try:
            self.callback()
        except Exception as exc:  # noqa: BLE001
            logger.error("daily_job_failed", error=str(exc))
        finally:
            with self._lock:
                if not self._stopped:
                    self._arm()
