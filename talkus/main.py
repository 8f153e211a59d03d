from fastapi import FastAPI
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from talkus.core.config import settings
from talkus.core.errors import http_error_handler
from talkus.db.init_db import create_all_tables
from talkus.middleware.request_logging import RequestLoggingMiddleware
from talkus.modules.posts.api.router import router as posts_router
from talkus.modules.users.api.router import router as users_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("talkus")

# Initialize the FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    exception_handlers={
        RequestValidationError: request_validation_exception_handler,
        StarletteHTTPException: http_error_handler,
    },
    debug=settings.DEBUG,
    description="Backend for the Talkus discussion forum",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    logger.info(f"Image storage provider: {settings.IMAGE_STORAGE_PROVIDER}")

    create_all_tables()

app.add_middleware(RequestLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(posts_router, prefix=f"{settings.PUBLIC_PREFIX}/posts", tags=["posts"])
app.include_router(users_router, prefix=f"{settings.PUBLIC_PREFIX}/user", tags=["users"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to Talkus",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("talkus.main:app", host="0.0.0.0", port=8000, reload=True)
