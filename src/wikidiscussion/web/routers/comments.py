"""Recent comments feed endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from wikidiscussion.core.modules.recent.models import CommentSummary
from wikidiscussion.core.pagination import PaginationResult
from wikidiscussion.web.deps import AppDep, UserDep, parse_number
from wikidiscussion.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["comments"])


@router.get(
    "/comments/recent",
    summary="List recent comments",
    description=(
        "Get recently added or edited comments, newest first, each comment at most once. "
        "Hidden, deleted and unreadable comments are left out."
    ),
    operation_id="listRecentComments",
    responses={
        200: {"description": "Page of recent comments"},
        400: {"model": ErrorResponse, "description": "Invalid namespace"},
    },
)
def list_recent_comments(
    app: AppDep,
    user: UserDep,
    ns: Annotated[str | None, Query(description="Namespace or page id to filter by")] = None,
    number: Annotated[str | None, Query(description="Page size, the configured default if missing or not a number")] = None,
    first: Annotated[str | None, Query(description="Matching comments to skip, 0 if missing or not a number")] = None,
) -> PaginationResult[CommentSummary]:
    return app.list_recent_comments(user, ns, parse_number(number), parse_number(first) or 0)
