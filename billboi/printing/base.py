from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime

from billboi.fetchers.base import Story


class PrintError(RuntimeError):
    pass


@dataclass
class PrintJob:
    stories: list[Story]
    generated_at: datetime = field(default_factory=datetime.now)


class PrinterBackend:
    backend_name: str

    def print_job(self, job: PrintJob) -> None:
        raise NotImplementedError

    def print_text(self, content: str, cpi: int | None = None) -> None:
        raise NotImplementedError
