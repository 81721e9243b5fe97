"""Per-page discussion endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from wikidiscussion.core.modules.thread.models import ThreadLink
from wikidiscussion.web.deps import AppDep, UserDep
from wikidiscussion.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["pages"])


@router.get(
    "/pages/{page_id}/discussion-link",
    summary="Get discussion link",
    description=(
        "Get the link to the discussion section of a page, labelled with its comment count. "
        "Without a count, the count is read from the page's comments; null if the page has no discussion."
    ),
    operation_id="getDiscussionLink",
    responses={
        200: {"description": "Discussion link, or null"},
        400: {"model": ErrorResponse, "description": "Invalid page id"},
        403: {"model": ErrorResponse, "description": "Page not readable"},
        404: {"model": ErrorResponse, "description": "Page not found"},
    },
)
def get_discussion_link(
    page_id: str,
    app: AppDep,
    user: UserDep,
    count: Annotated[int | None, Query(ge=0, description="Known number of comments")] = None,
) -> ThreadLink | None:
    return app.render_thread_link(user, page_id, count)
