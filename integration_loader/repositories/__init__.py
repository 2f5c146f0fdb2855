from .manifest_repository import ManifestRepository

__all__ = [
    'ManifestRepository'
]
