"""Custom exceptions for odfdr-installer.

This module defines the exception hierarchy used throughout the application.
Every error is fatal to a run: the CLI catches InstallerError, reports it
and exits with a non-zero status.
"""


class InstallerError(Exception):
    """Base exception for all odfdr-installer errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all installer errors with a single
    except clause if desired.

    Attributes:
        operation: Short label of the step that failed (e.g. 'login').

    """

    operation: str = "install"


class PreconditionError(InstallerError):
    """Raised when the run cannot start.

    This can occur when:
    - A required flag is missing
    - A required binary is not in the system PATH
    - The cluster name cannot be derived from the URL
    """

    operation = "precondition check"


class BinaryNotFoundError(PreconditionError):
    """Raised when a required binary (oc) is not found."""

    pass


class ClusterNameError(PreconditionError):
    """Raised when the cluster identifier cannot be parsed from the API URL."""

    operation = "cluster name parsing"


class AuthError(InstallerError):
    """Raised when logging into the OpenShift cluster fails.

    This can occur when:
    - The API URL is unreachable
    - The username or password is wrong
    - The oc binary disappeared between the precondition check and login
    """

    operation = "cluster login"


class MergeError(InstallerError):
    """Base exception for pull secret credential merge failures."""

    operation = "pull secret merge"


class MalformedDocument(MergeError):
    """Raised when a pull secret document is not a mapping with an auths mapping."""

    pass


class CredentialAcquisitionFailed(MergeError):
    """Raised when obtaining the registry credential fails.

    The underlying error is chained as ``__cause__``.
    """

    pass


class MergeCountMismatch(MergeError):
    """Raised when the merged document does not hold exactly one new entry.

    Attributes:
        registry: The registry host being added.
        expected: Expected number of auth entries.
        observed: Number of auth entries actually found.

    """

    def __init__(self, registry: str, expected: int, observed: int, source: str = "merged document") -> None:
        self.registry = registry
        self.expected = expected
        self.observed = observed
        self.source = source
        super().__init__(
            f"{source} has {observed} auth entries while adding {registry}, expected {expected}"
        )


class PullSecretError(InstallerError):
    """Raised when reading or writing the cluster pull secret fails."""

    operation = "pull secret update"


class ApplyError(InstallerError):
    """Raised when the cluster rejects a manifest."""

    operation = "manifest apply"
