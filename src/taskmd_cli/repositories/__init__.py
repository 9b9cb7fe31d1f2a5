"""Repository interfaces for taskmd.

Implementations (Adapters) live in ``taskmd_cli.adapters.markdown``.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
