"""OpenShift cluster session utilities.

This module derives the cluster identifier from the API URL and logs into
the cluster, producing a SessionHandle used by every later step.
"""

import tempfile
from pathlib import Path

from icecream import ic

from odfdr_installer import console
from odfdr_installer.core.openshift import OpenShiftCLI
from odfdr_installer.exceptions import ClusterNameError, PreconditionError
from odfdr_installer.models import SessionHandle


def get_cluster_name(url: str) -> str:
    """Derive the cluster identifier from an OpenShift API URL.

    The identifier is the second dot-separated segment, so
    'api.cluster.example.com:6443' yields 'cluster'.

    Args:
        url: The OpenShift API URL.

    Returns:
        The cluster identifier.

    Raises:
        ClusterNameError: If the URL has fewer than two dot-separated segments.

    """
    parts = url.split(".")
    if len(parts) < 2 or not parts[1]:
        raise ClusterNameError(f"Could not parse cluster name from URL '{url}'")
    ic(parts)
    return parts[1]


def create_kubeconfig(cluster: str, workdir: Path) -> Path:
    """Create an empty, uniquely named kubeconfig file for this run.

    The file is left in place after the run.

    Args:
        cluster: The cluster identifier, used as file name prefix.
        workdir: Directory the file is created in.

    Returns:
        Path to the new '<cluster>-kubeconfig-*' file.

    Raises:
        PreconditionError: If the file cannot be created in workdir.

    """
    try:
        kubeconfig = tempfile.NamedTemporaryFile(prefix=f"{cluster}-kubeconfig-", dir=workdir, delete=False)
    except OSError as err:
        raise PreconditionError(f"Cannot create kubeconfig in '{workdir}': {err.strerror}") from err
    kubeconfig.close()
    return Path(kubeconfig.name)


def login(oc: OpenShiftCLI, url: str, username: str, password: str, workdir: Path) -> SessionHandle:
    """Log into an OpenShift cluster.

    Args:
        oc: The oc wrapper to run commands with.
        url: The OpenShift API URL.
        username: The user to log in as.
        password: The user's password.
        workdir: Directory the kubeconfig file is created in.

    Returns:
        A SessionHandle for the logged-in cluster.

    Raises:
        ClusterNameError: If the cluster name cannot be derived from url.
        PreconditionError: If the kubeconfig file cannot be created.
        AuthError: If the login fails.

    """
    cluster = get_cluster_name(url)
    kubeconfig = create_kubeconfig(cluster, workdir)

    console.action(f"Logging into {console.highlight(url)} as {console.highlight(username)}")
    console.step(f"Using kubeconfig {kubeconfig}")

    oc.login(url, username, password, kubeconfig=kubeconfig)

    console.success(f"Logged into {console.highlight(cluster)} cluster")
    return SessionHandle(cluster=cluster, kubeconfig=kubeconfig)
