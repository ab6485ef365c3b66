from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional
from app.models.report import ContentAnalysis, ContentSuggestions

FileType = Literal["pdf", "image", "docx"]
JobStatus = Literal["pending", "processing", "completed", "failed"]
JobType = Literal["pdf", "ocr", "docx"]


class ExtractionResult(BaseModel):
    success: bool
    text: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[str] = None


class UploadedFile(BaseModel):
    id: str
    original_name: str
    filename: str
    path: str
    size: int
    mimetype: str
    file_type: FileType
    uploaded_at: str


class JobResult(BaseModel):
    text: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    analysis: ContentAnalysis
    suggestions: ContentSuggestions


class Job(BaseModel):
    id: str
    file_id: str
    status: JobStatus = "pending"
    type: JobType
    result: Optional[JobResult] = None
    error: Optional[str] = None
    created_at: str
    updated_at: str
