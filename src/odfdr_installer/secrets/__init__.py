"""Secrets management subpackage.

This package contains the registry credential merge and the cluster
pull secret round trip built on top of it.
"""

from odfdr_installer.secrets.merging import ensure_registry_credential, merge_documents
from odfdr_installer.secrets.pull_secret import update_pull_secret

__all__ = [
    # merging
    "ensure_registry_credential",
    "merge_documents",
    # pull_secret
    "update_pull_secret",
]
