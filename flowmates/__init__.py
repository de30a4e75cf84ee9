"""flowmates: bootstrap Cursor rules, issue workflow and git hooks into a repo."""

__version__ = "0.1.0"
