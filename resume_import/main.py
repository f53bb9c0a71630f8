import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from resume_import.api.routes.imports import router as import_router
from resume_import.api.routes.resume import router as resume_router
from resume_import.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Heuristic import of pasted or uploaded resume text into the editor's structured resume format",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(import_router)
app.include_router(resume_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-import", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Import API",
        version="0.1.0",
        description="Free-text resume import with confidence scoring",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
