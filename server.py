from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from src.api.responses import envelope
from src.api.v1.endpoints.comments import router as comment_router
from src.api.v1.endpoints.playlists import router as playlist_router
from src.config import CORS_ORIGINS
from src.domain.errors import DomainError
from src.logging_config import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

app = FastAPI(title="Video Comments & Playlists API")

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(comment_router)
app.include_router(playlist_router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return envelope(exc.status_code, None, exc.message)

@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    return envelope(exc.status_code, None, str(exc.detail))

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())
    return envelope(400, None, errors or "Invalid request")

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("API Error on %s %s", request.method, request.url.path)
    return envelope(500, None, "Internal server error")


@app.get("/")
async def root():
    return envelope(200, {"status": "ok"}, "Backend is running")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
