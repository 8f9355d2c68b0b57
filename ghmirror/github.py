"""A small client for the GitHub GraphQL API."""

from __future__ import annotations

import json
import sys
from typing import Any

import requests

from .github_types import (
    RepositoryPage,
    ResponseError,
    identity_from_json,
    list_repos_from_json,
)

IDENTITY_QUERY = """query {
  viewer {
    login
  }
}
"""

LIST_REPOS_QUERY = """query ($username: String!, $after: String) {
  repositoryOwner(login: $username) {
    repositories(first: 100, after: $after) {
      pageInfo {
        hasNextPage
        endCursor
      }
      nodes {
        name
        url
        isFork
        isPrivate
      }
    }
  }
}
"""


class GithubError(RuntimeError):
    """A request to the GitHub API failed or returned errors."""


def wrap_query(query: str, variables: dict[str, Any] | None = None) -> str:
    """Return the JSON request body for a GraphQL query and its variables."""
    body: dict[str, Any] = {"query": query}
    if variables is not None:
        body["variables"] = variables
    return json.dumps(body, indent=2)


def check_errors(root: Any) -> None:
    """Report every message under ``errors`` and raise GithubError if there are any."""
    errors = root.get("errors") if isinstance(root, dict) else None
    if not isinstance(errors, list):
        return
    messages = []
    for err in errors:
        message = err.get("message") if isinstance(err, dict) else None
        if not isinstance(message, str):
            message = "Unknown error"
        print(f"Github Error: {message}", file=sys.stderr)
        messages.append(message)
    raise GithubError("; ".join(messages) or "GitHub returned errors")


class GithubClient:
    """Sends GraphQL queries to a GitHub endpoint with a bearer token."""

    def __init__(self, endpoint: str, token: str, user_agent: str) -> None:
        self.endpoint = endpoint
        self.token = token
        self.user_agent = user_agent
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"bearer {token}",
                "Content-Type": "application/json",
                "User-Agent": user_agent,
            }
        )

    def copy(self) -> GithubClient:
        """Return an independent client with the same settings."""
        return GithubClient(self.endpoint, self.token, self.user_agent)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> GithubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _send(self, query: str, variables: dict[str, Any] | None = None) -> Any:
        body = wrap_query(query, variables)
        try:
            response = self._session.post(self.endpoint, data=body.encode("utf-8"))
        except requests.RequestException as exc:
            print(f"Failed to send request: {exc}", file=sys.stderr)
            raise GithubError(f"Failed to send request: {exc}") from exc
        try:
            root = json.loads(response.content)
        except ValueError as exc:
            print(f"Error parsing response: {exc}", file=sys.stderr)
            raise GithubError(f"Error parsing response: {exc}") from exc
        check_errors(root)
        return root

    def identity(self) -> str:
        """Return the login of the user the token belongs to."""
        root = self._send(IDENTITY_QUERY)
        try:
            return identity_from_json(root)
        except ResponseError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise GithubError(str(exc)) from exc

    def list_user_repos(self, username: str, after: str | None = None) -> RepositoryPage:
        """Return one page of ``username``'s repositories, starting after the cursor."""
        variables: dict[str, Any] = {"username": username}
        if after is not None:
            variables["after"] = after
        root = self._send(LIST_REPOS_QUERY, variables)
        try:
            return list_repos_from_json(root)
        except ResponseError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            print("Failed to parse response", file=sys.stderr)
            raise GithubError(f"Failed to parse response: {exc}") from exc