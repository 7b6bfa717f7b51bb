"""Tests for console.py module."""

from unittest.mock import patch

from odfdr_installer import console


class TestConsoleOutput:
    """Tests for console output functions."""

    def test_info_message(self):
        """Test info message format."""
        with patch.object(console.console, "print") as mock_print:
            console.info("Test message")
            mock_print.assert_called_once()
            call_arg = mock_print.call_args[0][0]
            assert "ℹ" in call_arg
            assert "Test message" in call_arg

    def test_success_message(self):
        """Test success message format."""
        with patch.object(console.console, "print") as mock_print:
            console.success("Operation complete")
            call_arg = mock_print.call_args[0][0]
            assert "✓" in call_arg
            assert "Operation complete" in call_arg

    def test_error_message(self):
        """Test error message format."""
        with patch.object(console.console, "print") as mock_print:
            console.error("Something failed")
            call_arg = mock_print.call_args[0][0]
            assert "✗" in call_arg
            assert "Something failed" in call_arg

    def test_action_message(self):
        """Test action message format."""
        with patch.object(console.console, "print") as mock_print:
            console.action("Doing something")
            call_arg = mock_print.call_args[0][0]
            assert "→" in call_arg
            assert "Doing something" in call_arg

    def test_warning_message(self):
        """Test warning message format."""
        with patch.object(console.console, "print") as mock_print:
            console.warning("Leftover file removed")
            call_arg = mock_print.call_args[0][0]
            assert "⚠" in call_arg
            assert "Leftover file removed" in call_arg

    def test_step_message(self):
        """Test step message format."""
        with patch.object(console.console, "print") as mock_print:
            console.step("Saved file")
            call_arg = mock_print.call_args[0][0]
            assert "•" in call_arg
            assert "Saved file" in call_arg

    def test_message_helpers_document_args(self):
        """Test that every message helper documents its message argument."""
        for helper in (console.info, console.success, console.warning, console.error, console.action, console.step):
            assert "message: The message to display." in helper.__doc__


class TestConsoleHighlight:
    """Tests for highlight function."""

    def test_highlight_wraps_text(self):
        """Test highlight wraps text in markup."""
        assert console.highlight("cluster") == "[highlight]cluster[/highlight]"


class TestConsolePanels:
    """Tests for key-value panels."""

    def test_summary_panel(self):
        """Test summary panel uses a green border."""
        with patch.object(console.console, "print") as mock_print:
            console.summary_panel("Cluster Provisioned", {"Cluster": "cluster"})
            panel = mock_print.call_args[0][0]
            assert panel.border_style == "green"
            assert "Cluster Provisioned" in panel.title

    def test_failure_panel(self):
        """Test failure panel uses a red border."""
        with patch.object(console.console, "print") as mock_print:
            console.failure_panel("Provisioning Failed", {"Operation": "cluster login"})
            panel = mock_print.call_args[0][0]
            assert panel.border_style == "red"
            assert "Provisioning Failed" in panel.title
