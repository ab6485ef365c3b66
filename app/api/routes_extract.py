from typing import Optional
from fastapi import APIRouter, Query, HTTPException
from app.core import config
from app.services.extract import extract_text
from app.utils.storage import find_original, file_type_of

router = APIRouter(prefix="/api", tags=["extract"])

@router.post("/extract")
def extract(
    file_id: str = Query(..., description="File ID returned by /api/upload"),
    language: Optional[str] = Query(None, description="Tesseract language code for image OCR"),
):
    path = find_original(file_id)
    if path is None:
        raise HTTPException(status_code=404, detail="File not found")

    file_type = file_type_of(path)
    result = extract_text(path, file_type, language or config.OCR_LANGUAGE)
    if not result.success:
        raise HTTPException(status_code=422, detail=f"Extraction failed: {result.error}")
    return {
        "success": True,
        "file_id": file_id,
        "file_type": file_type,
        "text": result.text,
        "metadata": result.metadata,
    }
