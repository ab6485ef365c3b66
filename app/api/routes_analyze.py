import logging
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from app.services.analyze import analyze
from app.services.suggest import generate_suggestions

log = logging.getLogger("analyze")

router = APIRouter(prefix="/api", tags=["analyze"])


class AnalyzeRequest(BaseModel):
    text: str


@router.post("/analyze")
def analyze_text(body: AnalyzeRequest):
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Please provide non-empty text content")
    log.info("Analyzing text (%d characters)", len(body.text))
    analysis = analyze(body.text)
    return {
        "success": True,
        "analysis": analysis.model_dump(),
        "suggestions": generate_suggestions(analysis).model_dump(),
    }
