from wikidiscussion.web.routers.comments import router as comments_router
from wikidiscussion.web.routers.metadata import router as metadata_router
from wikidiscussion.web.routers.pages import router as pages_router
from wikidiscussion.web.routers.profile import router as profile_router
from wikidiscussion.web.routers.threads import router as threads_router

__all__ = [
    "comments_router",
    "metadata_router",
    "pages_router",
    "profile_router",
    "threads_router",
]
