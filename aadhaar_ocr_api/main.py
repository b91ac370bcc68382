import traceback
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import AadhaarExtractionError
from app.core import messages
from app.core.logging import logger
from app.api.v1.endpoints.ocr import router as ocr_v1_router
from app.api.v2.endpoints.ocr import router as ocr_v2_router
from prometheus_fastapi_instrumentator import Instrumentator


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.FRONT_END),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include all API routes
    app.include_router(ocr_v1_router, prefix="/api/v1/ocr", tags=["v1"])
    app.include_router(ocr_v2_router, prefix="/api/v2/ocr", tags=["v2"])

    @app.exception_handler(AadhaarExtractionError)
    async def extraction_error_handler(request: Request, exc: AadhaarExtractionError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception occurred: %s\n%s",
            str(exc),
            ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": messages.SERVER_ERROR},
        )

    # Health check route (Prometheus can also use this)
    @app.get("/healthz")
    def health_check():
        return {"status": "ok"}

    # Initialize Prometheus metrics
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
