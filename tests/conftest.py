"""Shared test fixtures for odfdr-installer tests."""

import json
from unittest.mock import MagicMock, patch

import pytest

from odfdr_installer.core.openshift import OpenShiftCLI
from odfdr_installer.models import InstallParams, SessionHandle

RHCEPH_REGISTRY = "quay.io/rhceph-dev"


@pytest.fixture
def pull_secret_data():
    """Cluster pull secret with a single registry.redhat.io entry."""
    return {"auths": {"registry.redhat.io": {"auth": "cmVkaGF0OnNlY3JldA==", "email": "user@example.com"}}}


@pytest.fixture
def rhceph_credential_data():
    """Output of 'oc registry login' for quay.io/rhceph-dev."""
    return {"auths": {RHCEPH_REGISTRY: {"auth": "xyz"}}}


@pytest.fixture
def install_params():
    """Parameters for an installer run."""
    return InstallParams(
        url="api.cluster.example.com:6443",
        username="kubeadmin",
        password="abc",
        rhceph_password="user:xyz",
    )


@pytest.fixture
def session(tmp_path):
    """A session handle whose kubeconfig lives in a temporary directory."""
    kubeconfig = tmp_path / "cluster-kubeconfig-test"
    kubeconfig.touch()
    return SessionHandle(cluster="cluster", kubeconfig=kubeconfig)


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for command execution."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout=b"", stderr=b"")
        yield mock


@pytest.fixture
def mock_which():
    """Mock shutil.which so every binary resolves."""
    with patch("shutil.which") as mock:
        mock.side_effect = lambda name: f"/usr/bin/{name}"
        yield mock


@pytest.fixture
def mock_oc():
    """An OpenShiftCLI double that records calls."""
    return MagicMock(spec=OpenShiftCLI)


@pytest.fixture
def registry_login_writer():
    """Factory for registry_login side effects that write data to --to."""

    def _factory(data):
        def _registry_login(registry, auth_basic, destination, *, kubeconfig, error):  # noqa: ARG001
            destination.write_text(json.dumps(data))

        return _registry_login

    return _factory
