"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from penny_score.api.middleware import RequestIDMiddleware, MetricsMiddleware
from penny_score.api.v1 import score, tips
from penny_score.infrastructure.observability.logging import setup_logging
from penny_score.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Penny Score",
        description="Personal finance health score and improvement tips",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(tips.router, prefix="/v1", tags=["tips"])

    return app


app = create_app()
