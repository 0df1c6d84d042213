from .github_content_client import GitHubContentClient
from .version_cache import VersionTokenCache

__all__ = [
    "GitHubContentClient",
    "VersionTokenCache",
]
