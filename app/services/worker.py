from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from app.models.job import JobResult
from app.services.analyze import analyze
from app.services.extract import extract_text
from app.services.jobs import JobStore
from app.services.suggest import generate_suggestions

log = logging.getLogger("worker")


@dataclass(frozen=True)
class Task:
    job_id: str
    path: str
    file_type: str
    language: str = "eng"


def process_job(store: JobStore, task: Task) -> None:
    """Extract -> analyze -> suggest, writing a terminal state for the job."""
    store.update(task.job_id, "processing")

    result = extract_text(task.path, task.file_type, task.language)
    if not result.success:
        fallback = "OCR extraction failed" if task.file_type == "image" else "Text extraction failed"
        store.update(task.job_id, "failed", error=result.error or fallback)
        return

    analysis = analyze(result.text)
    store.update(
        task.job_id,
        "completed",
        result=JobResult(
            text=result.text,
            metadata=result.metadata,
            analysis=analysis,
            suggestions=generate_suggestions(analysis),
        ),
    )


class JobQueue:
    """
    FIFO task queue drained by one daemon worker thread.
    submit() never blocks the caller; the worker is started on first use.
    """

    _STOP = object()

    def __init__(self, store: JobStore, handler: Callable[[JobStore, Task], None] = process_job):
        self.store = store
        self.handler = handler
        self._q: queue.Queue = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._thread is None or not self._thread.is_alive():
                self._thread = threading.Thread(target=self._run, name="job-worker", daemon=True)
                self._thread.start()

    def submit(self, task: Task) -> None:
        self._q.put(task)
        self._ensure_worker()
        log.info("Queued job %s (%s)", task.job_id, task.file_type)

    def _run(self) -> None:
        while True:
            task = self._q.get()
            try:
                if task is self._STOP:
                    return
                self.handler(self.store, task)
            except Exception as e:
                log.exception("Processing error for job %s", task.job_id)
                self.store.update(task.job_id, "failed", error=str(e) or "An unexpected error occurred")
            finally:
                self._q.task_done()

    def join(self) -> None:
        """Block until every submitted task has reached a terminal state."""
        self._q.join()

    def shutdown(self) -> None:
        with self._lock:
            thread = self._thread
        if thread is not None and thread.is_alive():
            self._q.put(self._STOP)
            thread.join(timeout=5)
