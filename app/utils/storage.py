import os, uuid, tempfile
from datetime import datetime, timezone
from typing import Optional
from fastapi import UploadFile, HTTPException
import magic
from app.core import config
from app.models.job import UploadedFile


async def save_secure(file: UploadFile) -> UploadedFile:
    _, ext = os.path.splitext(file.filename or "")
    ext = ext.lower()
    if ext not in config.ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Allowed types: PDF, DOCX, JPEG, PNG, TIFF, BMP",
        )

    # staged beside the per-upload dirs so the final os.replace stays on one filesystem
    os.makedirs(config.DATA_DIR, exist_ok=True)
    size = 0
    with tempfile.NamedTemporaryFile(dir=config.DATA_DIR, prefix=".upload-", delete=False) as tmp:
        tmp_path = tmp.name
        try:
            while True:
                chunk = await file.read(1 << 20)  # 1 MB
                if not chunk:
                    break
                size += len(chunk)
                tmp.write(chunk)
        except BaseException:
            tmp.close()
            os.remove(tmp_path)
            raise

    try:
        if size == 0:
            raise HTTPException(status_code=400, detail="Uploaded file is empty")
        if size > config.MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail="File too large")

        mime = magic.Magic(mime=True)
        file_mime = mime.from_file(tmp_path)
        if file_mime not in config.MIME_ALLOW[ext]:
            raise HTTPException(
                status_code=400,
                detail=f"Unexpected MIME type: {file_mime} for {ext}"
            )

        file_id = uuid.uuid4().hex[:12]
        doc_dir = os.path.join(config.DATA_DIR, file_id)
        os.makedirs(doc_dir, mode=0o700, exist_ok=True)
        filename = f"original{ext}"
        dest = os.path.join(doc_dir, filename)
        os.replace(tmp_path, dest)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    return UploadedFile(
        id=file_id,
        original_name=file.filename or filename,
        filename=filename,
        path=dest,
        size=size,
        mimetype=file_mime,
        file_type=config.FILE_TYPES[ext],
        uploaded_at=datetime.now(timezone.utc).isoformat(),
    )


def find_original(file_id: str) -> Optional[str]:
    """Path of the stored upload for `file_id`, or None."""
    if not file_id or file_id in (".", "..") or os.path.basename(file_id) != file_id:
        return None
    doc_dir = os.path.join(config.DATA_DIR, file_id)
    if not os.path.isdir(doc_dir):
        return None
    originals = [f for f in os.listdir(doc_dir) if f.startswith("original.")]
    return os.path.join(doc_dir, originals[0]) if originals else None


def file_type_of(path: str) -> str:
    return config.FILE_TYPES[os.path.splitext(path)[1].lower()]
