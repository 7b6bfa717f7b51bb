"""Thin wrapper around the oc binary.

Every command runs with KUBECONFIG pointing at the kubeconfig passed in by
the caller. The process environment of the installer itself is never
modified.
"""

import os
import subprocess
from pathlib import Path

from icecream import ic

from odfdr_installer.exceptions import AuthError, InstallerError

# Flags whose value must never show up in debug output
_SECRET_FLAGS = ("--auth-basic=", "--password=", "--token=")
_SECRET_SWITCHES = ("-p", "--password", "--token")

_REDACTED = "******"

# Error message constants
_ERR_OC_NOT_FOUND = "oc not found; please install the OpenShift CLI and ensure it's on PATH"
_ERR_OC_FAILED = "Failed to {description} (exit code {code}){details}"


def redact_command(cmd: list[str]) -> list[str]:
    """Return a copy of cmd with credential values masked.

    Args:
        cmd: The command line to redact.

    Returns:
        The command with passwords and tokens replaced by asterisks.

    """
    redacted: list[str] = []
    hide_next = False
    for arg in cmd:
        if hide_next:
            redacted.append(_REDACTED)
            hide_next = False
            continue
        flag = next((f for f in _SECRET_FLAGS if arg.startswith(f)), None)
        if flag is not None:
            redacted.append(f"{flag}{_REDACTED}")
            continue
        hide_next = arg in _SECRET_SWITCHES
        redacted.append(arg)
    return redacted


class OpenShiftCLI:
    """Runs oc commands against a cluster selected by kubeconfig.

    Attributes:
        binary: Path or name of the oc binary.

    """

    def __init__(self, binary: str = "oc") -> None:
        """Initialize the wrapper.

        Args:
            binary: Path or name of the oc binary to invoke.

        """
        self.binary: str = binary

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"OpenShiftCLI(binary={self.binary!r})"

    @staticmethod
    def _env(kubeconfig: Path) -> dict[str, str]:
        return {**os.environ, "KUBECONFIG": str(kubeconfig)}

    def run(
        self,
        args: list[str],
        *,
        kubeconfig: Path,
        description: str,
        error: type[InstallerError],
        capture: bool = True,
    ) -> bytes:
        """Run an oc command and return its stdout.

        Args:
            args: Arguments passed to oc (without the binary itself).
            kubeconfig: Kubeconfig file the command runs against.
            description: What the command does, used in error messages.
            error: Exception class raised when the command fails.
            capture: If False, stdout and stderr go straight to the terminal.

        Returns:
            The captured stdout, or empty bytes when capture is False.

        Raises:
            InstallerError: The given error class, if oc is missing or fails.

        """
        cmd = [self.binary, *args]
        ic(redact_command(cmd))

        try:
            result = subprocess.run(
                cmd,
                env=self._env(kubeconfig),
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.PIPE if capture else None,
                check=True,
            )
        except FileNotFoundError as err:
            raise error(_ERR_OC_NOT_FOUND) from err
        except subprocess.CalledProcessError as err:
            stderr_msg = err.stderr.decode().strip() if err.stderr else ""
            details = f" - {stderr_msg}" if stderr_msg else ""
            raise error(
                _ERR_OC_FAILED.format(description=description, code=err.returncode, details=details)
            ) from err

        return result.stdout or b""

    def login(self, url: str, username: str, password: str, *, kubeconfig: Path) -> None:
        """Log into the cluster, storing the credentials in kubeconfig.

        Output is streamed to the terminal so that certificate prompts
        and server messages stay visible.

        Raises:
            AuthError: If the login fails.

        """
        self.run(
            ["login", url, "-u", username, "-p", password],
            kubeconfig=kubeconfig,
            description=f"log into {url} as {username}",
            error=AuthError,
            capture=False,
        )

    def apply(self, manifest_path: Path, *, kubeconfig: Path, error: type[InstallerError]) -> bytes:
        """Apply a manifest file to the cluster."""
        return self.run(
            ["apply", "-f", str(manifest_path)],
            kubeconfig=kubeconfig,
            description=f"apply {manifest_path}",
            error=error,
        )

    def get_secret_data(
        self,
        secret: str,
        namespace: str,
        key: str,
        *,
        kubeconfig: Path,
        error: type[InstallerError],
    ) -> bytes:
        """Return the base64-decoded value of one key of a secret."""
        template = f'--template={{{{index .data "{key}" | base64decode}}}}'
        return self.run(
            ["get", secret, "-n", namespace, template],
            kubeconfig=kubeconfig,
            description=f"get {namespace}/{secret}",
            error=error,
        )

    def set_secret_data(
        self,
        secret: str,
        namespace: str,
        key: str,
        source: Path,
        *,
        kubeconfig: Path,
        error: type[InstallerError],
    ) -> None:
        """Replace one key of a secret with the content of a file."""
        self.run(
            ["set", "data", secret, "-n", namespace, f"--from-file={key}={source}"],
            kubeconfig=kubeconfig,
            description=f"update {namespace}/{secret}",
            error=error,
        )

    def registry_login(
        self,
        registry: str,
        auth_basic: str,
        destination: Path,
        *,
        kubeconfig: Path,
        error: type[InstallerError],
    ) -> None:
        """Write a docker config JSON for registry to destination."""
        self.run(
            ["registry", "login", f"--registry={registry}", f"--auth-basic={auth_basic}", f"--to={destination}"],
            kubeconfig=kubeconfig,
            description=f"log into registry {registry}",
            error=error,
        )
