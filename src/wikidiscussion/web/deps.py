from typing import Annotated, cast

from fastapi import Depends, Request

from wikidiscussion.app import App
from wikidiscussion.config import Config
from wikidiscussion.core.modules.access.models import UserContext


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_user_context(request: Request, app: Annotated[App, Depends(get_app)]) -> UserContext:
    """Read the caller's identity from the headers set by the trusted reverse proxy."""
    config = cast(Config, request.app.state.config)
    return app.resolve_user(request.headers.get(config.user_header), request.headers.get(config.groups_header))


def parse_number(value: str | None) -> int | None:
    """Lenient number parsing: anything but ASCII digits means 'use the default'."""
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
UserDep = Annotated[UserContext, Depends(get_user_context)]
