"""Build status badges."""

from crest.badges.badge import Badge
from crest.badges.status import BadgeStatus, aggregate, SEVERITY_LEVELS, STATUS_COLORS
from crest.badges.url import build_url

__all__ = ["Badge", "BadgeStatus", "aggregate", "build_url", "SEVERITY_LEVELS", "STATUS_COLORS"]
