"""Tests for cli.py module."""

from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from odfdr_installer import __version__
from odfdr_installer.cli import DEFAULT_USERNAME, cli
from odfdr_installer.exceptions import AuthError, MergeCountMismatch
from odfdr_installer.models import InstallParams

REQUIRED_ARGS = ["--url", "api.cluster.example.com:6443", "--password", "abc", "--rhceph-password", "user:xyz"]


class TestCliVersion:
    """Tests for version command."""

    def test_version_flag(self):
        """Test --version flag prints version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_short_flag(self):
        """Test -v flag prints version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["-v"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestCliHelp:
    """Tests for help output."""

    def test_help_flag(self):
        """Test --help flag shows help text."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Prepare an OpenShift cluster" in result.output
        assert "--url" in result.output
        assert "--username" in result.output
        assert "--password" in result.output
        assert "--rhceph-password" in result.output
        assert "--debug" in result.output


class TestCliRequiredFlags:
    """Tests for missing required values."""

    def test_no_arguments(self):
        """Test that running without flags prints usage and exits 1."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "URL is required" in result.output
        assert "Usage: odfdr-installer" in result.output
        mock_installer.assert_not_called()

    def test_missing_password(self):
        """Test that a missing password prints usage and exits 1."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(
                cli, ["--url", "api.cluster.example.com:6443", "--rhceph-password", "x"], env={"OPENSHIFT_PASSWORD": None}
            )

        assert result.exit_code == 1
        assert "password is required" in result.output
        assert "Usage:" in result.output
        mock_installer.assert_not_called()

    def test_missing_rhceph_password(self):
        """Test that a missing registry password prints usage and exits 1."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(
                cli, ["--url", "api.cluster.example.com:6443", "--password", "abc"], env={"RHCEPH_PASSWORD": None}
            )

        assert result.exit_code == 1
        assert "RHCEPH password is required" in result.output
        mock_installer.assert_not_called()

    def test_passwords_from_environment(self):
        """Test that passwords can be given through the environment."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(
                cli,
                ["--url", "api.cluster.example.com:6443"],
                env={"OPENSHIFT_PASSWORD": "abc", "RHCEPH_PASSWORD": "user:xyz"},
            )

        assert result.exit_code == 0
        params = mock_installer.call_args[0][0]
        assert params.password == "abc"
        assert params.rhceph_password == "user:xyz"


class TestCliRun:
    """Tests for running the installer."""

    def test_success(self):
        """Test that a successful run exits 0 with the default username."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(cli, REQUIRED_ARGS)

        assert result.exit_code == 0
        mock_installer.assert_called_once_with(
            InstallParams(
                url="api.cluster.example.com:6443",
                username=DEFAULT_USERNAME,
                password="abc",
                rhceph_password="user:xyz",
            )
        )
        mock_installer.return_value.run.assert_called_once()

    def test_custom_username(self):
        """Test that --username overrides the default."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            result = runner.invoke(cli, [*REQUIRED_ARGS, "--username", "admin"])

        assert result.exit_code == 0
        assert mock_installer.call_args[0][0].username == "admin"

    def test_failure_exits_1(self):
        """Test that an installer error is reported and exits 1."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            instance = MagicMock()
            instance.cluster_name = "cluster"
            instance.run.side_effect = AuthError("Failed to log into api.cluster.example.com:6443 (exit code 1)")
            mock_installer.return_value = instance

            result = runner.invoke(cli, REQUIRED_ARGS)

        assert result.exit_code == 1
        assert "Provisioning Failed" in result.output
        assert "cluster login" in result.output
        assert "AuthError" in result.output

    def test_merge_failure_reported(self):
        """Test that a merge mismatch names the failed step and error type."""
        runner = CliRunner()

        with patch("odfdr_installer.cli.Installer") as mock_installer:
            instance = MagicMock()
            instance.cluster_name = "cluster"
            instance.run.side_effect = MergeCountMismatch(registry="quay.io/rhceph-dev", expected=2, observed=1)
            mock_installer.return_value = instance

            result = runner.invoke(cli, REQUIRED_ARGS)

        assert result.exit_code == 1
        assert "pull secret merge" in result.output
        assert "MergeCountMismatch" in result.output

    def test_debug_flag_enables_icecream(self):
        """Test --debug flag keeps icecream enabled."""
        runner = CliRunner()

        with (
            patch("odfdr_installer.cli.Installer"),
            patch("odfdr_installer.cli.ic") as mock_ic,
        ):
            result = runner.invoke(cli, [*REQUIRED_ARGS, "--debug"])

        assert result.exit_code == 0
        mock_ic.disable.assert_not_called()

    def test_debug_disabled_by_default(self):
        """Test icecream is disabled without --debug."""
        runner = CliRunner()

        with (
            patch("odfdr_installer.cli.Installer"),
            patch("odfdr_installer.cli.ic") as mock_ic,
        ):
            runner.invoke(cli, REQUIRED_ARGS)

        mock_ic.disable.assert_called_once()
