"""FastAPI routes for mysql-health classifications."""

from __future__ import annotations

from typing import Annotated, Callable

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse

from mysql_health.domain.settings import DEFAULT_FAILURE_STATUS_CODE
from mysql_health.domain.signals import ClassificationResult
from mysql_health.usecases.node_classifier import NodeClassifier

# Route path -> classification name. The lag-bounded replica route takes a
# path parameter and is registered separately.
CLASSIFICATION_ROUTES: dict[str, str] = {
    "/status/ro": "status.ro",
    "/status/rw": "status.rw",
    "/status/single": "status.single",
    "/status/leader": "status.leader",
    "/status/follower": "status.follower",
    "/status/topology": "status.topology",
    "/role/master": "role.master",
    "/role/replica": "role.replica",
    "/role/galera": "role.galera",
    "/read/galera/state": "read.galera_state",
    "/read/replication/lag": "read.replication_lag",
    "/read/replication/master": "read.replication_master",
    "/read/replication/replicas_count": "read.replicas_count",
}


def build_response(
    result: ClassificationResult,
    failure_status_code: int = DEFAULT_FAILURE_STATUS_CODE,
) -> JSONResponse:
    """Render a classification answer as the ``{status, content}`` envelope.

    Args:
        result: Classification answer.
        failure_status_code: Status code for a negative answer.

    Returns:
        JSONResponse with status 200 on success, failure_status_code otherwise.
    """
    return JSONResponse(
        content={"status": result.succeeded, "content": result.detail},
        status_code=200 if result.succeeded else failure_status_code,
    )


def create_health_router(
    classifier: NodeClassifier,
    failure_status_code: int = DEFAULT_FAILURE_STATUS_CODE,
) -> APIRouter:
    """Create FastAPI router with every classification endpoint.

    Endpoints are synchronous; FastAPI runs them in its thread pool, so
    concurrent requests share the classifier's pooled database handle.

    Args:
        classifier: NodeClassifier use case answering classifications.
        failure_status_code: Status code of negative answers.

    Returns:
        APIRouter with the /status, /role and /read endpoints.
    """
    router = APIRouter()

    def make_endpoint(name: str) -> Callable[[], JSONResponse]:
        def endpoint() -> JSONResponse:
            return build_response(classifier.classify(name), failure_status_code)

        endpoint.__name__ = f"get_{name.replace('.', '_')}"
        return endpoint

    for path, name in CLASSIFICATION_ROUTES.items():
        router.add_api_route(
            path,
            make_endpoint(name),
            methods=["GET"],
            name=name,
            response_class=JSONResponse,
        )

    @router.get("/role/replica/{threshold}", name="role.replica_by_lag")
    def get_role_replica_by_lag(
        threshold: Annotated[int, Path(ge=0, description="Maximum lag in seconds, 0 = unbounded")],
    ) -> JSONResponse:
        """Read-only replica whose lag is within ``threshold`` seconds.

        The threshold travels as an argument from the request path to the
        lag evaluator; it is never stored between requests.
        """
        result = classifier.classify("role.replica_by_lag", threshold_seconds=threshold)
        return build_response(result, failure_status_code)

    return router
