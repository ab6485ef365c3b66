from app.services.jobs import InMemoryJobStore, JobStore
from app.services.worker import JobQueue

# Lazy singletons
_STORE = None
def get_store() -> JobStore:
    global _STORE
    if _STORE is None:
        _STORE = InMemoryJobStore()
    return _STORE

_QUEUE = None
def get_queue() -> JobQueue:
    global _QUEUE
    if _QUEUE is None:
        _QUEUE = JobQueue(get_store())
    return _QUEUE
