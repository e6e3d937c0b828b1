"""Git-kick: squash feature branches with a fallback safety net."""

__version__ = "0.3.0"
