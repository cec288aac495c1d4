"""FastAPI application factory for the mysql-health service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from mysql_health.domain.settings import ServiceSettings
from mysql_health.usecases.node_classifier import NodeClassifier
from mysql_health_fastapi.middleware import RequestLoggingMiddleware
from mysql_health_fastapi.routes import create_health_router

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry

logger = logging.getLogger(__name__)


def create_app(
    classifier: NodeClassifier,
    settings: ServiceSettings | None = None,
    metrics_registry: CollectorRegistry | None = None,
) -> FastAPI:
    """Create the health-check application.

    Args:
        classifier: NodeClassifier wired to the monitored node.
        settings: Service settings. Defaults to ServiceSettings().
        metrics_registry: Registry exposed on /metrics when
            settings.metrics_enabled is True. Defaults to the global
            prometheus-client registry.

    Returns:
        FastAPI application with the classification routes, request
        logging, and optionally the Prometheus /metrics endpoint.
    """
    if settings is None:
        settings = ServiceSettings()

    app = FastAPI(title="mysql-health-check", docs_url=None, redoc_url=None)
    app.include_router(
        create_health_router(classifier, failure_status_code=settings.failure_status_code)
    )
    app.add_middleware(RequestLoggingMiddleware)

    if settings.metrics_enabled:
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, make_asgi_app

        app.mount("/metrics", make_asgi_app(registry=metrics_registry or REGISTRY))
        logger.info("Prometheus metrics exposed on /metrics")

    return app
