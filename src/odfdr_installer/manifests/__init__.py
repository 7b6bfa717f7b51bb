"""Bundled manifests and the applier that submits them."""

from odfdr_installer.manifests.applying import ManifestApplier
from odfdr_installer.manifests.payloads import CATALOG_SOURCE, DEFAULT_MANIFESTS, ICSP

__all__ = [
    "ManifestApplier",
    "CATALOG_SOURCE",
    "DEFAULT_MANIFESTS",
    "ICSP",
]
