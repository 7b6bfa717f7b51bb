"""Cluster pull secret operations.

This module fetches the cluster-wide pull secret, adds a registry
credential obtained with 'oc registry login', pushes the result back and
re-reads it to confirm the change was persisted.
"""

import contextlib
from pathlib import Path

from icecream import ic

from odfdr_installer import console
from odfdr_installer.core.openshift import OpenShiftCLI
from odfdr_installer.exceptions import CredentialAcquisitionFailed, MergeCountMismatch, PullSecretError
from odfdr_installer.models import MergeResult, PullSecretDocument, SessionHandle
from odfdr_installer.secrets.merging import ensure_registry_credential

PULL_SECRET_NAME = "secret/pull-secret"
PULL_SECRET_NAMESPACE = "openshift-config"
PULL_SECRET_KEY = ".dockerconfigjson"


def _scratch_file(session: SessionHandle, workdir: Path, suffix: str) -> Path:
    return workdir / f"{session.cluster}-{suffix}"


def _write_scratch(path: Path, content: bytes) -> None:
    try:
        path.write_bytes(content)
    except OSError as err:
        raise PullSecretError(f"Cannot write '{path}': {err.strerror}") from err


def fetch_pull_secret(oc: OpenShiftCLI, session: SessionHandle) -> bytes:
    """Read the raw docker config JSON of the cluster pull secret.

    Raises:
        PullSecretError: If the secret cannot be read.

    """
    return oc.get_secret_data(
        PULL_SECRET_NAME,
        PULL_SECRET_NAMESPACE,
        PULL_SECRET_KEY,
        kubeconfig=session.kubeconfig,
        error=PullSecretError,
    )


def push_pull_secret(oc: OpenShiftCLI, session: SessionHandle, source: Path) -> None:
    """Replace the cluster pull secret with the content of source.

    Raises:
        PullSecretError: If the secret cannot be updated.

    """
    oc.set_secret_data(
        PULL_SECRET_NAME,
        PULL_SECRET_NAMESPACE,
        PULL_SECRET_KEY,
        source,
        kubeconfig=session.kubeconfig,
        error=PullSecretError,
    )


def obtain_registry_credential(
    oc: OpenShiftCLI,
    session: SessionHandle,
    registry_host: str,
    registry_auth: str,
    destination: Path,
) -> PullSecretDocument:
    """Log into a registry and load the resulting docker config JSON.

    'oc registry login' adds to an existing file, so a leftover file from a
    previous run is removed first.

    Args:
        oc: The oc wrapper to run commands with.
        session: The cluster session.
        registry_host: The registry host-path to log into.
        registry_auth: Basic auth credential for the registry.
        destination: File the credential is written to.

    Returns:
        The parsed registry credential document.

    Raises:
        CredentialAcquisitionFailed: If the registry login fails.
        MalformedDocument: If the written file is not a docker config JSON.

    """
    if destination.exists():
        console.warning(f"Removing leftover registry login file {destination}")
        with contextlib.suppress(FileNotFoundError):
            destination.unlink()

    console.step(f"Logging into registry {console.highlight(registry_host)}")
    oc.registry_login(
        registry_host,
        registry_auth,
        destination,
        kubeconfig=session.kubeconfig,
        error=CredentialAcquisitionFailed,
    )
    return PullSecretDocument.from_file(destination)


def verify_pull_secret(oc: OpenShiftCLI, session: SessionHandle, registry_host: str, expected: int) -> None:
    """Re-read the live pull secret and check the merge was persisted.

    Raises:
        PullSecretError: If the secret cannot be read or lacks the registry.
        MalformedDocument: If the live secret is malformed.
        MergeCountMismatch: If the live secret has an unexpected number of entries.

    """
    live = PullSecretDocument.from_json(fetch_pull_secret(oc, session), source="live pull secret")
    ic(sorted(live.auths))

    if registry_host not in live:
        raise PullSecretError(f"live pull secret does not contain {registry_host} after the update")
    if len(live) != expected:
        raise MergeCountMismatch(registry=registry_host, expected=expected, observed=len(live), source="live pull secret")


def update_pull_secret(
    oc: OpenShiftCLI,
    session: SessionHandle,
    registry_host: str,
    registry_auth: str,
    workdir: Path,
) -> MergeResult:
    """Add a registry credential to the cluster pull secret.

    Writes '<cluster>-pull-secret.json' (snapshot before the merge),
    '<cluster>-append-pull-secret.json' (registry login output) and
    '<cluster>-new-pull-secret.json' (merged document) to workdir. The
    cluster secret is only overwritten after the merge has been verified.

    Args:
        oc: The oc wrapper to run commands with.
        session: The cluster session.
        registry_host: The registry host-path to add.
        registry_auth: Basic auth credential for the registry.
        workdir: Directory scratch files are written to.

    Returns:
        The MergeResult; changed is False if the cluster already had the credential.

    Raises:
        PullSecretError: If the secret cannot be read, written or re-read,
            or a scratch file cannot be written to workdir.
        MergeError: If the merge or its verification fails.

    """
    console.action(f"Adding {console.highlight(registry_host)} credential to the pull secret")

    with console.spinner("Fetching cluster pull secret..."):
        raw = fetch_pull_secret(oc, session)

    snapshot_path = _scratch_file(session, workdir, "pull-secret.json")
    _write_scratch(snapshot_path, raw)
    console.step(f"Saved current pull secret to {snapshot_path}")

    append_path = _scratch_file(session, workdir, "append-pull-secret.json")
    result = ensure_registry_credential(
        PullSecretDocument.from_json(raw, source=f"'{snapshot_path}'"),
        registry_host,
        lambda: obtain_registry_credential(oc, session, registry_host, registry_auth, append_path),
    )
    if not result.changed:
        return result

    merged_path = _scratch_file(session, workdir, "new-pull-secret.json")
    _write_scratch(merged_path, result.document.to_json().encode())
    console.step(f"Saved merged pull secret to {merged_path}")

    with console.spinner("Updating cluster pull secret..."):
        push_pull_secret(oc, session, merged_path)
        verify_pull_secret(oc, session, registry_host, expected=len(result.document))

    console.success(f"Pull secret now holds {len(result.document)} registry credentials")
    return result
