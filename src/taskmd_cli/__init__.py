"""taskmd - a Markdown-file task tracker."""

__version__ = "0.3.0"
