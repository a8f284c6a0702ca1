from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from blueprint.config import settings
from blueprint.core.logging_config import configure_logging

# IMPORT ROUTERS
from blueprint.routers.health import router as health_router
from blueprint.routers.questions import router as questions_router
from blueprint.routers.assessments import router as assessments_router
from blueprint.routers.results import router as results_router
from blueprint.routers.notifications import router as notifications_router
from blueprint.routers.errors import register_exception_handlers

configure_logging()


# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Questions"},
    {"name": "Assessments"},
    {"name": "Results"},
    {"name": "Notifications"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
register_exception_handlers(app)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(questions_router)        # Questions
app.include_router(assessments_router)      # Assessments
app.include_router(results_router)          # Results
app.include_router(notifications_router)    # Notifications


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("blueprint.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
