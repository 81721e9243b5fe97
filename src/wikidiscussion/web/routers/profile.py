from fastapi import APIRouter
from pydantic import BaseModel, Field

from wikidiscussion.web.deps import AppDep, UserDep

router = APIRouter(tags=["profile"])


class ModeratorStatus(BaseModel):
    """Moderation rights of the caller."""

    is_moderator: bool = Field(..., description="Whether the caller may moderate discussions")


@router.get(
    "/profile/moderator",
    summary="Check moderator rights",
    description="Check if the caller is a manager or a member of the moderator groups.",
    operation_id="getModeratorStatus",
    responses={200: {"description": "Moderator status of the caller"}},
)
def get_moderator_status(app: AppDep, user: UserDep) -> ModeratorStatus:
    return ModeratorStatus(is_moderator=app.is_moderator(user))
