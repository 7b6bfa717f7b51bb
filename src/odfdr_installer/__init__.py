"""odfdr-installer: Prepare an OpenShift cluster for ODF DR testing.

This package logs into a cluster, adds the quay.io/rhceph-dev credential
to the cluster pull secret and applies the bundled ImageContentSourcePolicy
and CatalogSource.

Example usage:
    from odfdr_installer import Installer, InstallParams

    params = InstallParams(
        url="api.cluster.example.com:6443",
        username="kubeadmin",
        password="abc",
        rhceph_password="user:xyz",
    )
    Installer(params).run()
"""

__version__ = "0.1.0"

from odfdr_installer.cli import cli
from odfdr_installer.core.installer import Installer
from odfdr_installer.exceptions import (
    ApplyError,
    AuthError,
    BinaryNotFoundError,
    ClusterNameError,
    CredentialAcquisitionFailed,
    InstallerError,
    MalformedDocument,
    MergeCountMismatch,
    MergeError,
    PreconditionError,
    PullSecretError,
)
from odfdr_installer.models import InstallParams, MergeResult, PullSecretDocument, SessionHandle
from odfdr_installer.secrets.merging import ensure_registry_credential

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "Installer",
    "InstallParams",
    "MergeResult",
    "PullSecretDocument",
    "SessionHandle",
    # Functions
    "ensure_registry_credential",
    # Exceptions
    "InstallerError",
    "PreconditionError",
    "BinaryNotFoundError",
    "ClusterNameError",
    "AuthError",
    "MergeError",
    "MalformedDocument",
    "CredentialAcquisitionFailed",
    "MergeCountMismatch",
    "PullSecretError",
    "ApplyError",
]
