"""Decoding of GitHub GraphQL responses into typed results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ResponseError(ValueError):
    """A GraphQL response did not have the expected shape."""


@dataclass(frozen=True)
class Repository:
    """One repository as listed by the API."""

    name: str
    url: str
    is_fork: bool
    is_private: bool


@dataclass
class RepositoryPage:
    """One page of an owner's repositories."""

    has_next_page: bool
    end_cursor: str
    repos: list[Repository] = field(default_factory=list)


def _object(parent: Any, key: str) -> dict:
    value = parent.get(key) if isinstance(parent, dict) else None
    if not isinstance(value, dict):
        raise ResponseError(f"{key} object not found")
    return value


def _typed(parent: Any, key: str, kind: type, label: str | None = None) -> Any:
    value = parent.get(key) if isinstance(parent, dict) else None
    if not isinstance(value, kind):
        raise ResponseError(f"{label or key} not found")
    return value


def identity_from_json(root: Any) -> str:
    """Return the viewer's login from an identity query response."""
    data = _object(root, "data")
    viewer = _object(data, "viewer")
    return _typed(viewer, "login", str)


def list_repos_from_json(root: Any) -> RepositoryPage:
    """Decode a repository listing response into a page of repositories."""
    data = _object(root, "data")
    owner = _object(data, "repositoryOwner")
    repositories = _object(owner, "repositories")
    page_info = _object(repositories, "pageInfo")

    has_next_page = _typed(page_info, "hasNextPage", bool)
    end_cursor = _typed(page_info, "endCursor", str)
    nodes = _typed(repositories, "nodes", list, "nodes array")

    repos = [
        Repository(
            name=_typed(node, "name", str),
            url=_typed(node, "url", str),
            is_fork=_typed(node, "isFork", bool),
            is_private=_typed(node, "isPrivate", bool),
        )
        for node in nodes
    ]
    return RepositoryPage(has_next_page=has_next_page, end_cursor=end_cursor, repos=repos)