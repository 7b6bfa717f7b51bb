"""Registry credential merging.

This module adds a single registry credential to a pull secret document and
checks that exactly one entry was added before the result is handed back.
"""

from collections.abc import Callable, Mapping
from typing import Any

from icecream import ic

from odfdr_installer import console
from odfdr_installer.exceptions import CredentialAcquisitionFailed, MalformedDocument, MergeCountMismatch, MergeError
from odfdr_installer.models import MergeResult, PullSecretDocument

CredentialSource = Callable[[], "PullSecretDocument | Mapping[str, Any]"]


def merge_documents(base: PullSecretDocument, update: PullSecretDocument) -> PullSecretDocument:
    """Return a right-biased union of the auths of base and update.

    Entries of update win on key conflicts. Top-level fields other than
    auths are taken from base. Neither input is modified.

    Args:
        base: The document to merge into.
        update: The document whose entries are added.

    Returns:
        A new merged document.

    """
    return PullSecretDocument(auths={**base.auths, **update.auths}, extra=dict(base.extra))


def ensure_registry_credential(
    pull_secret: PullSecretDocument | Mapping[str, Any],
    registry_host: str,
    obtain_credential: CredentialSource,
) -> MergeResult:
    """Ensure a pull secret holds a credential for registry_host.

    If the registry is already present nothing is merged and
    obtain_credential is never called, so re-running against a configured
    cluster does not log into the registry again.

    Args:
        pull_secret: The current pull secret, decoded or already parsed.
        registry_host: Registry host-path the credential is for
            (e.g. 'quay.io/rhceph-dev').
        obtain_credential: Callable returning a document with exactly one
            entry, for registry_host.

    Returns:
        MergeResult with changed=False and the original document when the
        registry was present, otherwise changed=True and the merged document.

    Raises:
        MalformedDocument: If either document is not a mapping with auths,
            or the credential's single entry is not for registry_host.
        CredentialAcquisitionFailed: If obtain_credential raises anything
            other than a MergeError; MergeError subclasses pass through.
        MergeCountMismatch: If the credential does not hold exactly one
            entry, or the merge did not add exactly one entry.

    """
    current = PullSecretDocument.from_mapping(pull_secret, source="pull secret")
    ic(sorted(current.auths))

    if registry_host in current:
        console.info(f"Credential for {console.highlight(registry_host)} already exists in pull secret")
        return MergeResult(document=current, changed=False)

    try:
        obtained = obtain_credential()
    except MergeError:
        raise
    except Exception as err:
        raise CredentialAcquisitionFailed(
            f"Failed to obtain credential for {registry_host}: {err}"
        ) from err

    source = f"credential for {registry_host}"
    credential = PullSecretDocument.from_mapping(obtained, source=source)
    ic(sorted(credential.auths))

    # Checked before merging so no existing entry can be overwritten
    if len(credential) != 1:
        raise MergeCountMismatch(registry=registry_host, expected=1, observed=len(credential), source=source)
    if registry_host not in credential:
        raise MalformedDocument(f"{source} holds an entry for {next(iter(credential.auths))} instead")

    merged = merge_documents(current, credential)

    expected = len(current) + 1
    if len(merged) != expected:
        raise MergeCountMismatch(registry=registry_host, expected=expected, observed=len(merged))

    console.step(f"Merged credential for {console.highlight(registry_host)} ({len(current)} → {len(merged)} entries)")
    return MergeResult(document=merged, changed=True)
