"""Runtime defaults for git-kick."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KickConfig:
    """Immutable defaults shared by all workflows."""

    fallback_prefix: str = "kk-fallback"
    default_compare: str = "develop"
    remote: str = "origin"
