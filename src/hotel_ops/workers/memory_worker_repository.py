from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Worker
from .repository import WorkerRepository


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, workers: Iterable[Worker] = ()):
        self._by_id: dict[str, Worker] = {w.worker_id: w for w in workers}

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        return self._by_id.get(worker_id)

    def list_all(self) -> Sequence[Worker]:
        return sorted(self._by_id.values(), key=lambda w: w.name)

    def add(self, worker: Worker) -> None:
        self._by_id[worker.worker_id] = worker
