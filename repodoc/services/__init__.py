"""
Services Layer for repodoc
==========================

Services handle GitHub access and the deterministic pipeline steps:

- GitHubClient: Authenticated GitHub REST calls
- RepoService: Repository metadata, root listing, user repositories
- select_key_files: Allow-list filter over the root listing
- ContentMaterializer: Concurrent file download and decode
- UserStore / CredentialResolver: Linked accounts and session lookup
- AccountService: GitHub account linking

DEPENDENCY FLOW:
----------------
    CredentialResolver ──► UserStore
    RepoService ─────────┐
                         ├──► GitHubClient
    ContentMaterializer ─┘
"""

from repodoc.services.github_client import GitHubClient
from repodoc.services.repo_service import RepoService
from repodoc.services.key_files import select_key_files
from repodoc.services.materializer import ContentMaterializer
from repodoc.services.user_store import UserStore
from repodoc.services.credentials import CredentialResolver

__all__ = [
    "GitHubClient",
    "RepoService",
    "select_key_files",
    "ContentMaterializer",
    "UserStore",
    "CredentialResolver",
]
