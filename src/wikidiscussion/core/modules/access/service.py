from collections.abc import Iterable

from wikidiscussion.core.core import Service
from wikidiscussion.core.modules.access.models import AuthLevel, UserContext


def is_member(entries: Iterable[str], user: UserContext) -> bool:
    """Check a user against entries of user names and '@group' names."""
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        if entry.startswith("@"):
            if entry[1:] in user.groups:
                return True
        elif user.name is not None and entry == user.name:
            return True
    return False


def acl_scopes(page_id: str) -> list[str]:
    """ACL table keys that apply to a page, most specific first."""
    scopes = [page_id]
    parts = page_id.split(":")[:-1]
    while parts:
        scopes.append(":".join(parts) + ":*")
        parts.pop()
    scopes.append("*")
    return scopes


class AccessService(Service):
    """Answers permission and role questions for the current caller."""

    def is_superuser(self, user: UserContext) -> bool:
        return is_member(self.core.config.superusers, user)

    def is_manager(self, user: UserContext) -> bool:
        return self.is_superuser(user) or is_member(self.core.config.managers, user)

    def is_moderator(self, user: UserContext) -> bool:
        """Managers always moderate; others only as members of the moderator groups."""
        if self.is_manager(user):
            return True
        return is_member(self.core.config.moderator_groups, user)

    def permission_level(self, page_id: str, user: UserContext) -> int:
        """Look up the permission level of a page in the static ACL table."""
        if self.is_superuser(user):
            return AuthLevel.ADMIN
        acl = self.core.config.acl
        for scope in acl_scopes(page_id):
            if scope in acl:
                return acl[scope]
        return self.core.config.default_permission

    def can_read(self, page_id: str, user: UserContext) -> bool:
        return self.permission_level(page_id, user) >= AuthLevel.READ
