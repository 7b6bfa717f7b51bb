"""Installer facade class.

This module provides the Installer class which runs the provisioning
sequence against one cluster, coordinating between the specialized
modules:

    precondition check -> login -> pull secret update -> ICSP -> CatalogSource

The first failure aborts the run. Steps already completed are not rolled
back; re-running is safe because the pull secret step is a no-op when the
credential is present and 'oc apply' is idempotent.
"""

from pathlib import Path

from icecream import ic

from odfdr_installer import console
from odfdr_installer.core import cluster
from odfdr_installer.core.host import check_required_binaries
from odfdr_installer.core.openshift import OpenShiftCLI
from odfdr_installer.manifests.applying import ManifestApplier
from odfdr_installer.models import InstallParams, MergeResult, SessionHandle
from odfdr_installer.secrets.pull_secret import update_pull_secret

# Registry whose credential is added to the cluster pull secret
RHCEPH_REGISTRY = "quay.io/rhceph-dev"


class Installer:
    """Provisions an OpenShift cluster for ODF disaster recovery testing.

    Attributes:
        params: Parameters of this run.
        workdir: Directory scratch files are written to.
        oc: The oc wrapper used for all cluster calls.
        applier: Applies the bundled manifests.
        session: The cluster session, set once logged in.

    """

    def __init__(
        self,
        params: InstallParams,
        *,
        workdir: Path | None = None,
        oc: OpenShiftCLI | None = None,
        applier: ManifestApplier | None = None,
        registry: str = RHCEPH_REGISTRY,
    ) -> None:
        """Initialize Installer.

        Args:
            params: Parameters of this run.
            workdir: Directory scratch files are written to. Defaults to
                the current working directory.
            oc: The oc wrapper to use. Defaults to 'oc' from PATH.
            applier: The manifest applier. Defaults to the bundled manifests.
            registry: Registry whose credential is added to the pull secret.

        """
        self.params: InstallParams = params
        self.workdir: Path = workdir if workdir is not None else Path.cwd()
        self.oc: OpenShiftCLI = oc if oc is not None else OpenShiftCLI()
        self.applier: ManifestApplier = applier if applier is not None else ManifestApplier(self.oc)
        self.registry: str = registry
        self.session: SessionHandle | None = None

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Installer(url={self.params.url!r}, workdir={self.workdir!r})"

    @property
    def cluster_name(self) -> str:
        """The cluster identifier, or the raw URL before login."""
        return self.session.cluster if self.session is not None else self.params.url

    def check_preconditions(self) -> None:
        """Ensure the required binaries exist and the URL names a cluster.

        Raises:
            BinaryNotFoundError: If a required binary is missing.
            ClusterNameError: If the cluster name cannot be parsed.

        """
        check_required_binaries()
        cluster.get_cluster_name(self.params.url)

    def login(self) -> SessionHandle:
        """Log into the cluster and remember the session."""
        self.session = cluster.login(
            self.oc,
            self.params.url,
            self.params.username,
            self.params.password,
            self.workdir,
        )
        ic(self.session)
        return self.session

    def update_pull_secret(self, session: SessionHandle) -> MergeResult:
        """Add the registry credential to the cluster pull secret."""
        return update_pull_secret(
            self.oc,
            session,
            self.registry,
            self.params.rhceph_password,
            self.workdir,
        )

    def run(self) -> None:
        """Run the full provisioning sequence.

        Raises:
            InstallerError: On the first step that fails.

        """
        self.check_preconditions()
        session = self.login()
        result = self.update_pull_secret(session)
        applied = self.applier.apply_all(session, self.workdir)

        console.newline()
        console.summary_panel(
            "Cluster Provisioned",
            {
                "Cluster": session.cluster,
                "Kubeconfig": str(session.kubeconfig),
                "Pull secret": "updated" if result.changed else "unchanged",
                "Manifests": ", ".join(path.name for path in applied),
            },
        )
