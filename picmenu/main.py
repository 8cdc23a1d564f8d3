import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from picmenu.core.config import settings
from picmenu.core.errors import GENERIC_ERROR_MESSAGE, MenuProcessingError
from picmenu.core.logging import setup_logging
from picmenu.api import endpoints

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(MenuProcessingError)
async def menu_error_handler(request: Request, exc: MenuProcessingError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Error processing %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})

# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}

app.include_router(endpoints.router, prefix=settings.API_STR)
