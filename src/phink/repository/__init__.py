"""Repository handle for phink.

Classes:
    Repository: A git working directory and its command factories.
"""

from phink.repository._repository import Repository

__all__ = ["Repository"]
