"""Host system utilities for odfdr-installer.

This module checks that the binaries the installer shells out to are
available before any cluster interaction is attempted.
"""

import shutil
from collections.abc import Iterable

from icecream import ic

from odfdr_installer import console
from odfdr_installer.exceptions import BinaryNotFoundError

# Binaries that must be resolvable on PATH
REQUIRED_BINARIES: tuple[str, ...] = ("oc",)


def find_binary(name: str) -> str:
    """Resolve a binary on PATH.

    Args:
        name: The binary name (e.g. 'oc').

    Returns:
        The absolute path of the binary.

    Raises:
        BinaryNotFoundError: If the binary is not installed or not in PATH.

    """
    path = shutil.which(name)
    if path is None:
        raise BinaryNotFoundError(f"{name} is not installed or not in PATH")
    ic(name, path)
    return path


def check_required_binaries(binaries: Iterable[str] = REQUIRED_BINARIES) -> dict[str, str]:
    """Ensure every required binary is available.

    Args:
        binaries: Names of the binaries to look up.

    Returns:
        Mapping of binary name to its resolved path.

    Raises:
        BinaryNotFoundError: On the first binary that cannot be found.

    """
    resolved = {name: find_binary(name) for name in binaries}
    console.step(f"Found required binaries: {', '.join(resolved)}")
    return resolved
