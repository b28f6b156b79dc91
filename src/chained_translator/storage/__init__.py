"""Storage layer for the chained translator.

Provides the collaborator protocols and a local-disk filesystem
implementation.
"""

from chained_translator.storage.local import LocalFilesystem
from chained_translator.storage.protocols import Filesystem, TranslationLoader

__all__ = ["Filesystem", "LocalFilesystem", "TranslationLoader"]
