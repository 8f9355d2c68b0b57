# ghmirror

ghmirror is a set of building blocks for keeping mirrors of GitHub
repositories. It can ask the GitHub GraphQL API who a token belongs to, page
through the repositories of a user or organisation, and check that the local
host has `git` and a base directory for the mirrors.

## Requirements

- Python 3.10 or later
- `requests`
- A GitHub token with read access to the repositories you want listed

## Configuration

`ghmirror.config` holds the settings as plain dataclasses:

- `GithubConfig(owner, token, endpoint=..., user_agent=..., skip_forks=False,
  skip_private=False)` describes one owner. The endpoint defaults to
  `https://api.github.com/graphql` and the user agent to
  `github-mirror/0.1.4`.
- `Config(owners=[], git_base="/srv/git", quiet=False)` gathers the owners,
  the base directory for mirrors and a quiet flag.

```python
from ghmirror.config import Config, GithubConfig

config = Config(owners=[GithubConfig(owner="my-org", token="token")])
```

## Checking the host

```python
from ghmirror.precheck import PrecheckError, precheck_self

precheck_self(config)
```

`precheck_self` raises `PrecheckError` if `git --version` cannot be run or if
`config.git_base` is not an existing directory. The two checks are also
available on their own as `has_git()` and `git_base_exists(path)`, which
return a boolean and print an error to standard error on failure.

## Talking to GitHub

`ghmirror.github.GithubClient` sends GraphQL queries with a bearer token:

```python
from ghmirror.github import GithubClient

with GithubClient(
    "https://api.github.com/graphql", "token", "github-mirror/0.1.4"
) as client:
    login = client.identity()
    cursor = None
    while True:
        page = client.list_user_repos("my-org", cursor)
        for repo in page.repos:
            print(repo.name, repo.url, repo.is_fork, repo.is_private)
        if not page.has_next_page:
            break
        cursor = page.end_cursor
```

- `identity()` returns the login of the token's owner.
- `list_user_repos(username, after)` returns a `RepositoryPage` with
  `has_next_page`, `end_cursor` and a list of `Repository` entries.
- `copy()` returns an independent client with the same settings; `close()`
  releases the HTTP session.

Transport failures, unparsable responses, an `errors` array in the response
and responses of the wrong shape all raise `GithubError`. Messages from the
`errors` array are also printed to standard error.

The lower-level helpers are public too: `wrap_query(query, variables)` builds
the JSON request body, `check_errors(root)` raises on an `errors` array, and
`ghmirror.github_types.identity_from_json(root)` and
`list_repos_from_json(root)` decode parsed responses, raising `ResponseError`
when a field is missing or has the wrong type.

## What ghmirror does not do

- It does not clone or update mirrors. Nothing in the package runs
  `git clone` or `git fetch`; it only lists repositories and checks the host.
- It has no command-line program. You drive it from Python.
- It does not read configuration files. `Config` and `GithubConfig` must be
  built in code.
- `skip_forks`, `skip_private` and `quiet` are stored on the configuration,
  but nothing in the package acts on them; apply them yourself when walking
  a `RepositoryPage`.

## Development

The test suite uses pytest and responses; both are listed in the `test`
extra.