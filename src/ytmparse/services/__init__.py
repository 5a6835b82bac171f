"""Business logic services for ytmparse.

Public API:
    LibraryService - Fetch library surfaces and assemble their entities
"""

from ytmparse.services.library import LibraryService

__all__ = [
    "LibraryService",
]
