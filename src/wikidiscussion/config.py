from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    pages_path: str  # Directory holding page sources (<ns>/<page>.txt)
    meta_path: str  # Directory holding page metadata, comment records and the comment changelog
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = []
    lang: str = "en"  # Language of comment count labels and the column header
    base_url: str = ""  # Wiki base URL used for discussion links, e.g. https://wiki.example.org
    url_rewrite: bool = False  # Build links as /<id> instead of /doku.php?id=<id>
    recent: int = Field(default=20, gt=0)  # Default page size of the recent comments feed
    max_scan_lines: int = Field(default=10000, gt=0)  # Upper bound of changelog lines examined per recent comments query
    hidden_pages: str = ""  # Regex matched against ":<page id>"; matching pages never show up in feeds
    superusers: list[str] = []  # User names or @groups with full rights
    managers: list[str] = []  # User names or @groups with manager rights
    moderator_groups: list[str] = []  # User names or @groups allowed to moderate discussions
    acl: dict[str, int] = {}  # Static permission table: page id, "ns:*" or "*" -> permission level
    default_permission: int = 1  # Permission level when no acl entry matches (1 = read)
    user_header: str = "X-Remote-User"  # Header set by the trusted reverse proxy with the user name
    groups_header: str = "X-Remote-Groups"  # Header with comma separated groups of that user
    # Build metadata injected during Docker build via environment variables
    git_commit_hash: str = "unknown"
    git_commit_date: str = "unknown"
    build_time: str = "unknown"

    model_config = {
        "env_file": [".env"],
        "env_prefix": "WIKIDISCUSSION_",
        "extra": "ignore",
    }
