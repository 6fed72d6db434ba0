from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import logger, get_settings, check_api_keys_on_startup
from config.constants import SEARCH_CONFIG
from exceptions import TruthGuardException, ConfigError, ValidationException
from middleware import RequestContextMiddleware, get_request_id
from models import SearchRequest, AnalyzeRequest
from api import search_upstream
from services import analyze
from utils import InputValidator

app = FastAPI(title="TruthGuard API")

@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()

app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(TruthGuardException)
async def truthguard_exception_handler(request: Request, exc: TruthGuardException):
    logger.warning(
        "[%s] %s %s failed: %s",
        get_request_id(),
        request.method,
        request.url.path,
        exc.to_dict(),
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response_body())

REQUEST_ERROR_MESSAGES = {
    "/api/search": SEARCH_CONFIG.MISSING_QUERY_MESSAGE,
    "/api/analyze": SEARCH_CONFIG.MISSING_TEXT_MESSAGE,
}

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Bodies that fail the schema get the same ``{error}`` answer as a missing field."""
    path = request.url.path
    if path == "/api/search" and not get_settings().SERPER_API_KEY:
        error = ConfigError("SERPER_API_KEY", SEARCH_CONFIG.MISSING_KEY_MESSAGE)
    else:
        field = "query" if path == "/api/search" else "text"
        error = ValidationException(field, REQUEST_ERROR_MESSAGES.get(path, "Invalid request"))
    logger.warning("[%s] %s %s rejected body: %s", get_request_id(), request.method, path, exc.errors())
    return JSONResponse(status_code=error.status_code, content=error.to_response_body())

@app.get("/")
async def health_check():
    return {"status": "ok", "message": "TruthGuard API is running."}

@app.post("/api/search")
async def search(req: Optional[SearchRequest] = None):
    """Relay a search query to the upstream search API."""
    req = req or SearchRequest()
    return await search_upstream(req.query, req.num)

@app.post("/api/analyze")
async def analyze_claim(req: Optional[AnalyzeRequest] = None):
    """Run the keyword analyzer on the submitted text."""
    text = InputValidator.require_text(req.text if req else None, "text", SEARCH_CONFIG.MISSING_TEXT_MESSAGE)
    result = await analyze(text)
    return result.model_dump(mode="json", by_alias=True)

if __name__ == "__main__":
    import uvicorn

    port = get_settings().PORT
    logger.info(f"API proxy running on http://localhost:{port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
