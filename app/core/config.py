import os
from dotenv import load_dotenv

load_dotenv()

MAX_UPLOAD_BYTES = int(os.getenv("MAX_FILE_SIZE", 10 * 1024 * 1024))  # 10 MB
DATA_DIR = os.getenv("UPLOAD_DIR", "data")
OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

ALLOWED_EXTENSIONS = {'.pdf', '.docx', '.jpg', '.jpeg', '.png', '.tif', '.tiff', '.bmp'}
MIME_ALLOW = {
    ".pdf": {"application/pdf"},
    ".docx": {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/zip",
    },
    ".jpg": {"image/jpeg"},
    ".jpeg": {"image/jpeg"},
    ".png": {"image/png"},
    ".tif": {"image/tiff"},
    ".tiff": {"image/tiff"},
    ".bmp": {"image/bmp", "image/x-ms-bmp"},
}
FILE_TYPES = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".jpg": "image",
    ".jpeg": "image",
    ".png": "image",
    ".tif": "image",
    ".tiff": "image",
    ".bmp": "image",
}

# Analyzer configuration
WORDS_PER_MINUTE = 200
OPTIMAL_LENGTH = (50, 300)      # words, inclusive
LONG_SENTENCE_THRESHOLD = 25    # words
READABILITY_TARGET = 60         # Flesch Reading Ease below this is flagged
LONG_PARAGRAPH_WORDS = 10       # intro/conclusion must exceed this
MAX_KEYWORDS = 10
MAX_HASHTAGS = 5
