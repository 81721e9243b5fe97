"""Metadata endpoints for exposing system information."""

from fastapi import APIRouter

from wikidiscussion.web.deps import AppDep

router = APIRouter(tags=["metadata"])


@router.get(
    "/metadata/version",
    summary="Get version information",
    description="Returns build and version information including package version, git commit hash, commit date, and build time.",
    operation_id="getVersion",
    responses={200: {"description": "Version and build information"}},
)
def get_version(app: AppDep) -> dict[str, str]:
    """Get version information."""
    return app.get_version()
