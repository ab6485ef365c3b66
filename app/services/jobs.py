from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.models.job import Job, JobResult, JobStatus

log = logging.getLogger("jobs")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class JobStore(ABC):
    """Keyed job storage. Swap the in-memory one for a persistent backend in production."""

    @abstractmethod
    def get(self, job_id: str) -> Optional[Job]: ...

    @abstractmethod
    def set(self, job: Job) -> None: ...

    @abstractmethod
    def list(self, file_id: Optional[str] = None) -> List[Job]: ...

    @abstractmethod
    def delete(self, job_id: str) -> bool: ...

    def create(self, file_id: str, file_type: str) -> Job:
        ts = _now()
        job = Job(
            id=uuid.uuid4().hex,
            file_id=file_id,
            type="ocr" if file_type == "image" else file_type,
            created_at=ts,
            updated_at=ts,
        )
        self.set(job)
        log.info("Job created: %s for file %s", job.id, file_id)
        return job

    def update(
        self,
        job_id: str,
        status: JobStatus,
        result: Optional[JobResult] = None,
        error: Optional[str] = None,
    ) -> Optional[Job]:
        job = self.get(job_id)
        if job is None:
            return None
        changes = {"status": status, "updated_at": _now()}
        if result is not None:
            changes["result"] = result
        if error is not None:
            changes["error"] = error
        job = job.model_copy(update=changes)
        self.set(job)
        log.info("Job updated: %s -> %s", job_id, status)
        return job


class InMemoryJobStore(JobStore):
    def __init__(self) -> None:
        self._jobs: Dict[str, Job] = {}
        self._lock = threading.Lock()

    def get(self, job_id: str) -> Optional[Job]:
        with self._lock:
            return self._jobs.get(job_id)

    def set(self, job: Job) -> None:
        with self._lock:
            self._jobs[job.id] = job

    def list(self, file_id: Optional[str] = None) -> List[Job]:
        with self._lock:
            jobs = list(self._jobs.values())
        if file_id is not None:
            jobs = [j for j in jobs if j.file_id == file_id]
        return jobs

    def delete(self, job_id: str) -> bool:
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._jobs.clear()
