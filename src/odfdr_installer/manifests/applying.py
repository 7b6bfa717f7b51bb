"""Manifest application.

This module writes bundled manifests to the working directory and submits
them to the cluster with 'oc apply'.
"""

from collections.abc import Iterable
from pathlib import Path

import yaml

from odfdr_installer import console
from odfdr_installer.core.openshift import OpenShiftCLI
from odfdr_installer.exceptions import ApplyError
from odfdr_installer.manifests.payloads import DEFAULT_MANIFESTS
from odfdr_installer.models import Manifest, SessionHandle

_REQUIRED_FIELDS = ("apiVersion", "kind")


def validate_manifest(manifest: Manifest) -> None:
    """Check that a manifest holds a single Kubernetes resource document.

    Args:
        manifest: The manifest to check.

    Raises:
        ValueError: If the content is not a single YAML mapping with
            apiVersion and kind.

    """
    try:
        docs = [doc for doc in yaml.safe_load_all(manifest.content) if doc is not None]
    except yaml.YAMLError as err:
        raise ValueError(f"{manifest.name} manifest contains malformed YAML: {err}") from err

    if len(docs) != 1 or not isinstance(docs[0], dict):
        raise ValueError(f"{manifest.name} manifest must contain exactly one YAML mapping")

    missing = [name for name in _REQUIRED_FIELDS if name not in docs[0]]
    if missing:
        raise ValueError(f"{manifest.name} manifest is missing {', '.join(missing)}")


class ManifestApplier:
    """Applies static manifests to a cluster.

    Attributes:
        oc: The oc wrapper used to apply manifests.
        manifests: The manifests in the order they are applied.

    """

    def __init__(self, oc: OpenShiftCLI, manifests: Iterable[Manifest] = DEFAULT_MANIFESTS) -> None:
        """Initialize the applier.

        Args:
            oc: The oc wrapper used to apply manifests.
            manifests: The manifests to apply, in order.

        Raises:
            ValueError: If a manifest is not a valid Kubernetes resource.

        """
        self.oc: OpenShiftCLI = oc
        self.manifests: tuple[Manifest, ...] = tuple(manifests)
        for manifest in self.manifests:
            validate_manifest(manifest)

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"ManifestApplier(manifests={[m.name for m in self.manifests]!r})"

    def apply(self, session: SessionHandle, manifest: Manifest, workdir: Path) -> Path:
        """Write a manifest to '<cluster>-<suffix>' and apply it.

        Args:
            session: The cluster session.
            manifest: The manifest to apply.
            workdir: Directory the manifest file is written to.

        Returns:
            Path of the written manifest file.

        Raises:
            ApplyError: If the file cannot be written or the cluster rejects it.

        """
        console.action(f"Applying {console.highlight(manifest.name)}")

        path = workdir / f"{session.cluster}-{manifest.suffix}"
        try:
            path.write_text(manifest.content)
        except OSError as err:
            raise ApplyError(f"Cannot write {manifest.name} to '{path}': {err.strerror}") from err

        output = self.oc.apply(path, kubeconfig=session.kubeconfig, error=ApplyError)
        if output:
            console.step(output.decode().strip())

        console.success(f"{manifest.name} applied")
        return path

    def apply_all(self, session: SessionHandle, workdir: Path) -> list[Path]:
        """Apply every manifest in order, stopping at the first failure.

        Returns:
            Paths of the written manifest files.

        Raises:
            ApplyError: If any manifest fails.

        """
        return [self.apply(session, manifest, workdir) for manifest in self.manifests]
