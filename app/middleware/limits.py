from starlette.requests import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from app.core import config

class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject oversized bodies from the Content-Length header, before reading them."""

    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        if cl is not None:
            try:
                length = int(cl)
            except ValueError:
                return JSONResponse({"detail": "Bad Content-Length"}, status_code=400)
            # multipart framing adds a little on top of the file itself
            if length > config.MAX_UPLOAD_BYTES + 64 * 1024:
                return JSONResponse({"detail": "File too large"}, status_code=413)
        return await call_next(request)
