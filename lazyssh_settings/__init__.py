"""Per-user UI preferences for lazyssh, stored in ``~/.lazyssh/settings.json``."""

__version__ = "0.1.0"
