"""Discussion thread listing endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from wikidiscussion.core.modules.thread.models import ThreadSummary
from wikidiscussion.web.deps import AppDep, UserDep, parse_number
from wikidiscussion.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["threads"])


@router.get(
    "/threads",
    summary="List discussion threads",
    description=(
        "Get pages with an active discussion in a namespace and its sub namespaces, "
        "most recently commented first. Pages the caller cannot read are left out."
    ),
    operation_id="listThreads",
    responses={
        200: {"description": "Thread summaries, most recent activity first"},
        400: {"model": ErrorResponse, "description": "Invalid namespace"},
    },
)
def list_threads(
    app: AppDep,
    user: UserDep,
    ns: Annotated[str, Query(description="Namespace, empty for the whole wiki")] = "",
    number: Annotated[str | None, Query(description="Maximum threads to return")] = None,
    skip_empty: Annotated[bool, Query(description="Leave out discussions without comments")] = False,
) -> list[ThreadSummary]:
    return app.list_threads(user, ns, parse_number(number), skip_empty)


@router.get(
    "/discussion/header",
    summary="Get comments column header",
    description="Localized header of the comments column in page lists.",
    operation_id="getColumnHeader",
    responses={200: {"description": "Column header"}},
)
def get_column_header(app: AppDep) -> dict[str, str]:
    return {"header": app.render_column_header()}
