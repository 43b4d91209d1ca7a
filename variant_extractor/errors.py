"""
Erreurs typées de la couche fetch/normalisation.
Les points d'entrée de détection les attrapent toutes (fail-open) :
seule la couche basse les lève.
"""


class VariantExtractionError(Exception):
    """Base de toutes les erreurs d'extraction de variantes."""


class ContentFetchError(VariantExtractionError):
    """Appel réseau échoué, statut HTTP non-2xx ou corps non-JSON."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class BlocksParseError(VariantExtractionError):
    """`data.blocks` est une chaîne JSON illisible."""


class InvalidDocumentError(VariantExtractionError):
    """Document sans `data.blocks` exploitable (absent ou pas une liste)."""
