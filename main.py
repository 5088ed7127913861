import os
import sys
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure local imports resolve
sys.path.append(os.path.dirname(__file__))

# Core
from core.config import settings
from core.database import mongo
from core.errors import FeePortalError
from core.logging_config import logger

# Routers
from routers.auth import router as auth_router
from routers.fee_requests import router as fee_requests_router
from routers.health import router as health_router


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Fee request approval workflow for students, faculty and HOD",
    )

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials="*" not in settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup / shutdown
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info(f"🚀 Starting {settings.PROJECT_NAME} ({settings.ENV})")

    @app.on_event("shutdown")
    async def on_shutdown():
        mongo.close()

    # -------------------------------------------------
    # Error handling ({"error": message}, never internals)
    # -------------------------------------------------
    @app.exception_handler(FeePortalError)
    async def handle_fee_portal_error(request: Request, exc: FeePortalError):
        if exc.status_code in (401, 403, 500):
            logger.warning(f"HTTP {exc.status_code} at {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(f"HTTP {exc.status_code} at {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {field}: {first.get('msg', 'invalid value')}" if field else "Invalid request"
        return JSONResponse(
            status_code=422,
            content={"error": message, "detail": jsonable_encoder(errors)},
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(auth_router)
    app.include_router(fee_requests_router)
    app.include_router(health_router)

    # -------------------------------------------------
    # Root Redirect (front end entry page)
    # -------------------------------------------------
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse("/signup.html", status_code=302)

    # -------------------------------------------------
    # Static front end (mounted last so API routes win)
    # -------------------------------------------------
    if settings.STATIC_DIR:
        if os.path.isdir(settings.STATIC_DIR):
            app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="static")
        else:
            logger.warning(f"STATIC_DIR '{settings.STATIC_DIR}' not found, static pages disabled")

    return app


# Create the global FastAPI instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
