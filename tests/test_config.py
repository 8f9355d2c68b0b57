from ghmirror.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_GIT_BASE,
    DEFAULT_USER_AGENT,
    Config,
    GithubConfig,
)


def test_github_config_defaults():
    cfg = GithubConfig(owner="my-org", token="token")
    assert cfg.endpoint == "https://api.github.com/graphql"
    assert cfg.user_agent == DEFAULT_USER_AGENT
    assert cfg.user_agent.startswith("github-mirror/")
    assert cfg.skip_forks is False
    assert cfg.skip_private is False


def test_github_config_overrides():
    cfg = GithubConfig(
        owner="my-org",
        token="token",
        endpoint="https://api.example.com/graphql",
        user_agent="user-agent",
        skip_forks=True,
        skip_private=True,
    )
    assert cfg.owner == "my-org"
    assert cfg.token == "token"
    assert cfg.endpoint == "https://api.example.com/graphql"
    assert cfg.user_agent == "user-agent"
    assert cfg.skip_forks and cfg.skip_private


def test_config_defaults():
    config = Config()
    assert config.git_base == "/srv/git"
    assert config.git_base == DEFAULT_GIT_BASE
    assert config.quiet is False
    assert config.owners == []


def test_config_owner_lists_are_independent():
    first = Config()
    second = Config()
    first.owners.append(GithubConfig(owner="a", token="token"))
    assert len(first.owners) == 1
    assert second.owners == []


def test_config_keeps_owner_order():
    owners = [GithubConfig(owner=name, token="token") for name in ("a", "b", "c")]
    config = Config(owners=owners)
    assert [o.owner for o in config.owners] == ["a", "b", "c"]
    assert config.owners[0].endpoint == DEFAULT_ENDPOINT