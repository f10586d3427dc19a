"""Domain-Oriented Observability for the directory application layer.

Probes for store operations following Domain-Oriented Observability patterns.
"""

from directory.application.observability.store_probe import (
    DefaultDirectoryStoreProbe,
    DirectoryStoreProbe,
)

__all__ = [
    "DirectoryStoreProbe",
    "DefaultDirectoryStoreProbe",
]
