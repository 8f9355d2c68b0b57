"""Configuration model for mirroring GitHub repository owners."""

from __future__ import annotations

from dataclasses import dataclass, field

_VERSION = "0.1.4"

DEFAULT_ENDPOINT = "https://api.github.com/graphql"
DEFAULT_USER_AGENT = f"github-mirror/{_VERSION}"
DEFAULT_GIT_BASE = "/srv/git"


@dataclass
class GithubConfig:
    """Settings for one repository owner to mirror."""

    owner: str
    token: str
    endpoint: str = DEFAULT_ENDPOINT
    user_agent: str = DEFAULT_USER_AGENT
    skip_forks: bool = False
    skip_private: bool = False


@dataclass
class Config:
    """Top-level configuration: where mirrors live and which owners to mirror."""

    owners: list[GithubConfig] = field(default_factory=list)
    git_base: str = DEFAULT_GIT_BASE
    quiet: bool = False