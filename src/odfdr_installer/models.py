"""Data models for odfdr-installer.

This module provides type-safe data structures for the application,
replacing loosely-typed dictionaries with proper Python data classes.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, NamedTuple

from odfdr_installer.exceptions import MalformedDocument

# Top-level key holding the per-registry credentials in a docker config JSON
AUTHS_KEY = "auths"


@dataclass(frozen=True, slots=True)
class PullSecretDocument:
    """A docker config JSON document (cluster pull secret or registry login output).

    Attributes:
        auths: Mapping of registry host-path to its opaque credential record.
        extra: Any other top-level fields, preserved as-is.

    """

    auths: dict[str, Any]
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any, source: str = "pull secret") -> "PullSecretDocument":
        """Build a document from decoded JSON.

        Args:
            data: The decoded JSON value.
            source: Name of the document used in error messages.

        Returns:
            A new PullSecretDocument holding copies of the input mappings.

        Raises:
            MalformedDocument: If data is not a mapping or lacks an auths mapping.

        """
        if isinstance(data, PullSecretDocument):
            return data
        if not isinstance(data, Mapping):
            raise MalformedDocument(f"{source} is not a JSON object (got {type(data).__name__})")
        if AUTHS_KEY not in data or data[AUTHS_KEY] is None:
            raise MalformedDocument(f"{source} does not contain '{AUTHS_KEY}'")
        auths = data[AUTHS_KEY]
        if not isinstance(auths, Mapping):
            raise MalformedDocument(f"{source} has an invalid '{AUTHS_KEY}' field (got {type(auths).__name__})")

        extra = {key: value for key, value in data.items() if key != AUTHS_KEY}
        return cls(auths=dict(auths), extra=extra)

    @classmethod
    def from_json(cls, raw: str | bytes, source: str = "pull secret") -> "PullSecretDocument":
        """Parse a document from JSON text.

        Raises:
            MalformedDocument: If the text is not valid JSON or has the wrong shape.

        """
        try:
            data = json.loads(raw)
        except ValueError as err:
            raise MalformedDocument(f"{source} is not valid JSON: {err}") from err
        return cls.from_mapping(data, source=source)

    @classmethod
    def from_file(cls, path: Path) -> "PullSecretDocument":
        """Load a document from a JSON file.

        Raises:
            MalformedDocument: If the file is missing, unreadable or malformed.

        """
        try:
            raw = path.read_text()
        except OSError as err:
            raise MalformedDocument(f"Cannot read '{path}': {err.strerror}") from err
        return cls.from_json(raw, source=f"'{path}'")

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain JSON-compatible data."""
        return {**self.extra, AUTHS_KEY: dict(self.auths)}

    def to_json(self) -> str:
        """Render the document as JSON text."""
        return json.dumps(self.to_dict(), indent=2)

    def __len__(self) -> int:
        return len(self.auths)

    def __contains__(self, registry: object) -> bool:
        return registry in self.auths


class MergeResult(NamedTuple):
    """Outcome of adding a registry credential to a pull secret.

    Attributes:
        document: The merged document, or the untouched original on a no-op.
        changed: False when the registry was already present and nothing was merged.

    """

    document: PullSecretDocument
    changed: bool


class SessionHandle(NamedTuple):
    """Authenticated access to one cluster.

    Attributes:
        cluster: The cluster identifier derived from the API URL.
        kubeconfig: Path to the scratch kubeconfig written by 'oc login'.

    """

    cluster: str
    kubeconfig: Path


class Manifest(NamedTuple):
    """A static Kubernetes manifest bundled with the tool.

    Attributes:
        name: Human readable label (e.g. 'ImageContentSourcePolicy').
        suffix: File name suffix; the file is written as '<cluster>-<suffix>'.
        content: The YAML document, applied byte-for-byte.

    """

    name: str
    suffix: str
    content: str


@dataclass(frozen=True, slots=True)
class InstallParams:
    """Parameters for one installer run.

    Attributes:
        url: The OpenShift API URL (e.g. 'api.cluster.example.com:6443').
        username: The OpenShift user to log in as.
        password: The OpenShift user's password.
        rhceph_password: Basic auth credential for the rhceph-dev registry.

    """

    url: str
    username: str
    password: str = field(repr=False)
    rhceph_password: str = field(repr=False)
