import re
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlparse

from ghvars.ghvars_error import InvalidRepositoryError

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass(frozen=True)
class Repository:
    """A repository identified by owner and name"""

    owner: str
    name: str

    def __post_init__(self):
        for segment in (self.owner, self.name):
            if not isinstance(segment, str) or not _SEGMENT_RE.match(segment):
                raise InvalidRepositoryError(
                    f"{self.owner!r}/{self.name!r} is not a valid repository"
                )

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.slug

    @classmethod
    def from_slug(cls, slug: str) -> "Repository":
        """Parse a repository from an 'owner/name' string"""
        parts = slug.strip().split("/")
        if len(parts) != 2:
            raise InvalidRepositoryError(f"{slug!r} is not of the form 'owner/name'")
        return cls(owner=parts[0], name=parts[1])

    @classmethod
    def from_url(cls, url: str) -> "Repository":
        """Parse a repository from a url such as https://github.com/owner/name"""
        parsed = urlparse(url)
        parts = [part for part in parsed.path.split("/") if part]
        if parts[:1] == ["repos"]:
            parts = parts[1:]
        if len(parts) < 2:
            raise InvalidRepositoryError(f"{url!r} does not identify a repository")
        name = parts[1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        return cls(owner=parts[0], name=name)

    @classmethod
    def from_value(cls, value: Any) -> "Repository":
        """Resolve a string, mapping or object exposing owner / name to a Repository"""
        if isinstance(value, Repository):
            return value
        if isinstance(value, str):
            return cls.from_slug(value)
        if isinstance(value, Mapping):
            return cls._from_mapping(value)
        owner = getattr(value, "owner", None)
        name = getattr(value, "name", None)
        if owner is None or name is None:
            raise InvalidRepositoryError(f"{value!r} does not identify a repository")
        return cls(owner=_owner_login(owner), name=name)

    @classmethod
    def _from_mapping(cls, value: Mapping) -> "Repository":
        owner = next(
            (value[key] for key in ("owner", "user", "username") if value.get(key) is not None),
            None,
        )
        if owner is not None:
            name = value.get("name") or value.get("repo")
            if name is not None:
                return cls(owner=_owner_login(owner), name=name)
        full_name = value.get("full_name")
        if full_name:
            return cls.from_slug(full_name)
        raise InvalidRepositoryError(f"{dict(value)!r} does not identify a repository")

    @staticmethod
    def path(repo: Any) -> str:
        """Get the path segment addressing the repository given.

        Numeric ids are addressed as repositories/{id}. Anything else is resolved
        to an owner and name and addressed as repos/{owner}/{name}
        """
        if isinstance(repo, bool):
            raise InvalidRepositoryError(f"{repo!r} does not identify a repository")
        if isinstance(repo, int):
            return f"repositories/{repo}"
        return f"repos/{Repository.from_value(repo).slug}"


def _owner_login(owner: Any) -> str:
    if isinstance(owner, Mapping):
        return owner.get("login")
    return getattr(owner, "login", owner)
