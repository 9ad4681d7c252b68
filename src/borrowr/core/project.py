"""Read project metadata from package.json."""

import json
from pathlib import Path


def _expand_shorthand(repository: str) -> str:
    # npm allows "github:owner/repo" and bare "owner/repo"
    value = repository.removeprefix("github:")
    if "://" in value or value.count("/") != 1:
        return repository
    return f"https://github.com/{value}"


def read_package_repository(cwd: Path) -> str | None:
    """Return the repository URL declared in cwd/package.json, if any.

    Both the string form and the {"type", "url"} object form are supported.
    A missing or unreadable package.json yields None.
    """
    package_json = cwd / "package.json"
    if not package_json.is_file():
        return None

    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    repository = data.get("repository")
    if isinstance(repository, dict):
        repository = repository.get("url")
    if not isinstance(repository, str) or not repository.strip():
        return None
    return _expand_shorthand(repository.strip())
