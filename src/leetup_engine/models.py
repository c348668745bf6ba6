"""Problem stub model — the externally fetched input to generation."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any


def kebab_case(value: str) -> str:
    """Normalize a problem title or slug to its kebab-case slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.strip().lower()).strip("-")


@dataclass(frozen=True)
class ProblemStub:
    """A problem skeleton as fetched from the judge.

    ``code`` is the raw function/class skeleton; ``definition`` the
    human-readable statement, if one was fetched. ``slug`` is always
    stored kebab-cased.
    """

    id: int | str
    slug: str
    lang: str
    code: str
    definition: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "slug", kebab_case(self.slug))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProblemStub:
        missing = [f for f in ("id", "slug", "lang", "code") if f not in data]
        if missing:
            raise ValueError(f"Problem stub missing required field(s): {', '.join(missing)}")
        return cls(
            id=data["id"],
            slug=str(data["slug"]),
            lang=str(data["lang"]),
            code=str(data["code"]),
            definition=data.get("definition"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
