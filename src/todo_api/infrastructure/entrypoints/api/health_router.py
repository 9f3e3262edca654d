from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/health")
def health_check():
    try:
        app_version = version("todo-api")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "todo-api",
        "version": app_version
    }


@router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
