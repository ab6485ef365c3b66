from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from app.api.deps import get_store
from app.services.jobs import JobStore

router = APIRouter(prefix="/api/jobs", tags=["jobs"])

@router.get("")
def list_jobs(
    file_id: Optional[str] = Query(None, description="Only jobs for this upload"),
    store: JobStore = Depends(get_store),
):
    jobs = store.list(file_id)
    return {"success": True, "jobs": [j.model_dump() for j in jobs], "count": len(jobs)}

@router.get("/{job_id}")
def get_job(job_id: str, store: JobStore = Depends(get_store)):
    job = store.get(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"No job found with ID: {job_id}")
    return {"success": True, "job": job.model_dump()}

@router.delete("/{job_id}")
def delete_job(job_id: str, store: JobStore = Depends(get_store)):
    if not store.delete(job_id):
        raise HTTPException(status_code=404, detail=f"No job found with ID: {job_id}")
    return {"success": True}
