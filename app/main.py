import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.deps import get_queue
from app.api.routes_upload import router as upload_router
from app.api.routes_analyze import router as analyze_router
from app.api.routes_extract import router as extract_router
from app.api.routes_jobs import router as jobs_router
from app.core.config import CORS_ORIGINS
from app.middleware.limits import BodySizeLimitMiddleware

logging.basicConfig(level=logging.INFO)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    get_queue().shutdown()

app = FastAPI(title="Social Content Analyzer", lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(CORSMiddleware, allow_origins=CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "message": "Social Media Content Analyzer API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

app.include_router(upload_router)
app.include_router(analyze_router)
app.include_router(extract_router)
app.include_router(jobs_router)
