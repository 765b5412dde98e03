"""Tests for PermissionGate."""

from unittest.mock import Mock

from audio_browser.core.permissions import PermissionGate, PermissionStatus


def make_backend(status, request_result=PermissionStatus.GRANTED):
    """Create a mock permission backend."""
    backend = Mock()
    backend.status.return_value = status
    backend.request.return_value = request_result
    return backend


class TestPermissionGate:
    """Test storage permission checks."""

    def test_no_backend_always_grants(self):
        """Test platforms without a permission model succeed trivially."""
        assert PermissionGate().ensure_permission() is True

    def test_already_granted_skips_request(self):
        """Test an existing grant does not prompt."""
        backend = make_backend(PermissionStatus.GRANTED)
        assert PermissionGate(backend).ensure_permission() is True
        backend.request.assert_not_called()

    def test_request_granted(self):
        """Test a successful interactive request."""
        backend = make_backend(PermissionStatus.DENIED, PermissionStatus.GRANTED)
        assert PermissionGate(backend).ensure_permission() is True
        backend.request.assert_called_once()
        backend.open_settings.assert_not_called()

    def test_request_denied(self):
        """Test a refused request returns False without opening settings."""
        backend = make_backend(PermissionStatus.DENIED, PermissionStatus.DENIED)
        assert PermissionGate(backend).ensure_permission() is False
        backend.open_settings.assert_not_called()

    def test_permanently_denied_opens_settings(self):
        """Test permanent denial opens system settings and still returns False."""
        backend = make_backend(
            PermissionStatus.DENIED, PermissionStatus.PERMANENTLY_DENIED
        )
        assert PermissionGate(backend).ensure_permission() is False
        backend.open_settings.assert_called_once()

    def test_settings_failure_does_not_change_result(self):
        """Test errors opening settings are ignored."""
        backend = make_backend(
            PermissionStatus.DENIED, PermissionStatus.PERMANENTLY_DENIED
        )
        backend.open_settings.side_effect = RuntimeError("no settings activity")
        assert PermissionGate(backend).ensure_permission() is False

    def test_status_values(self):
        """Test status enum values are plain strings."""
        assert PermissionStatus.GRANTED == "granted"
        assert PermissionStatus("permanently_denied") is (
            PermissionStatus.PERMANENTLY_DENIED
        )
