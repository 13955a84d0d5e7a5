"""Badge descriptor — either computed from builds or the degraded default."""

from __future__ import annotations

from dataclasses import dataclass

from crest.badges.status import BadgeStatus, DEFAULT_COLOR
from crest.badges.url import build_url


@dataclass(frozen=True)
class Badge:
    label: str = ""
    color: str = DEFAULT_COLOR
    degraded: bool = False
    reason: str | None = None

    @classmethod
    def computed(cls, status: BadgeStatus) -> "Badge":
        return cls(label=status.label, color=status.color)

    @classmethod
    def default(cls, reason: str) -> "Badge":
        """The empty, unknown-colored badge shown when nothing can be computed."""
        return cls(degraded=True, reason=reason)

    def url(self, template: str) -> str:
        return build_url(template, self.label, self.color)
