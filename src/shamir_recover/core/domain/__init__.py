"""
Domain models and value objects.

Contains share-document entities: ShareMetadata, ShareEntry, SharePoint,
ReconstructionRequest.
"""

from shamir_recover.core.domain.share import (
    ReconstructionRequest,
    ShareEntry,
    ShareMetadata,
    SharePoint,
)

__all__ = [
    "ShareMetadata",
    "ShareEntry",
    "SharePoint",
    "ReconstructionRequest",
]
