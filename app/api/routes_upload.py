import logging
import os
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from app.api.deps import get_queue, get_store
from app.core import config
from app.services.jobs import JobStore
from app.services.worker import JobQueue, Task
from app.utils.storage import save_secure, find_original, file_type_of

log = logging.getLogger("upload")

router = APIRouter(prefix="/api/upload", tags=["upload"])

@router.post("")
async def upload(
    file: UploadFile = File(...),
    language: Optional[str] = Query(None, description="Tesseract language code for image OCR"),
    store: JobStore = Depends(get_store),
    jobs: JobQueue = Depends(get_queue),
):
    uploaded = await save_secure(file)
    job = store.create(uploaded.id, uploaded.file_type)
    # processing runs on the worker; the client polls /api/jobs/{job_id}
    jobs.submit(Task(job.id, uploaded.path, uploaded.file_type, language or config.OCR_LANGUAGE))

    log.info("File uploaded: id=%s type=%s size=%.2f KB job=%s",
             uploaded.id, uploaded.file_type, uploaded.size / 1024, job.id)
    return {
        "success": True,
        "file": uploaded.model_dump(),
        "job_id": job.id,
        "message": "File uploaded successfully and processing started",
    }

@router.get("/{file_id}")
def upload_info(file_id: str):
    path = find_original(file_id)
    if path is None:
        raise HTTPException(status_code=404, detail="File not found")
    return {
        "success": True,
        "file_id": file_id,
        "filename": os.path.basename(path),
        "file_type": file_type_of(path),
        "size": os.path.getsize(path),
    }
