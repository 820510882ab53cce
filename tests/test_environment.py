"""Tests for Hyprland session detection."""

import socket
import subprocess
from unittest.mock import patch

import pytest

from hyprgborder.environment import (
    EnvironmentStatus,
    check_environment,
    format_environment_status,
    get_hyprland_version,
    is_hyprland_running,
    validate_environment,
)
from hyprgborder.exceptions import (
    HyprlandNotRunningError,
    MissingEnvironmentVariableError,
    SocketNotAccessibleError,
)

SIGNATURE = "abc123_1700000000"


@pytest.fixture
def hypr_session(temp_dir, monkeypatch):
    """Environment variables plus a real control socket file."""
    socket_dir = temp_dir / "hypr" / SIGNATURE
    socket_dir.mkdir(parents=True)
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    sock.bind(str(socket_dir / ".socket.sock"))

    monkeypatch.setenv("XDG_RUNTIME_DIR", str(temp_dir))
    monkeypatch.setenv("HYPRLAND_INSTANCE_SIGNATURE", SIGNATURE)
    yield socket_dir / ".socket.sock"
    sock.close()


def completed(returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


@pytest.mark.unit
class TestHelpers:
    """Test the subprocess-backed probes."""

    def test_hyprland_running(self):
        with patch("hyprgborder.environment.subprocess.run", return_value=completed(0)) as run:
            assert is_hyprland_running() is True
        assert run.call_args[0][0] == ["pgrep", "-x", "Hyprland"]

    def test_hyprland_not_running(self):
        with patch("hyprgborder.environment.subprocess.run", return_value=completed(1)):
            assert is_hyprland_running() is False

    def test_pgrep_missing(self):
        with patch("hyprgborder.environment.subprocess.run", side_effect=FileNotFoundError("pgrep")):
            assert is_hyprland_running() is False

    def test_version_first_line(self):
        output = "Hyprland 0.41.2 built from branch main\nDate: 2024-06-19\n"
        with patch("hyprgborder.environment.subprocess.run", return_value=completed(0, output)):
            assert get_hyprland_version() == "Hyprland 0.41.2 built from branch main"

    def test_version_unavailable(self):
        with patch(
            "hyprgborder.environment.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="hyprctl", timeout=2.0),
        ):
            assert get_hyprland_version() is None


@pytest.mark.unit
class TestCheckEnvironment:
    """Test check_environment and validate_environment."""

    def test_valid_session(self, hypr_session):
        with patch("hyprgborder.environment.is_hyprland_running", return_value=True), \
             patch("hyprgborder.environment.get_hyprland_version", return_value="Hyprland 0.41.2"):
            status = check_environment()

        assert status.is_valid
        assert status.socket_path == str(hypr_session)
        assert status.hyprland_version == "Hyprland 0.41.2"
        assert status.errors == []

    def test_validate_returns_status(self, hypr_session):
        with patch("hyprgborder.environment.is_hyprland_running", return_value=True), \
             patch("hyprgborder.environment.get_hyprland_version", return_value=None):
            assert validate_environment().socket_accessible

    def test_not_running(self, hypr_session):
        with patch("hyprgborder.environment.is_hyprland_running", return_value=False):
            status = check_environment()
            assert not status.is_valid
            assert status.hyprland_version is None
            with pytest.raises(HyprlandNotRunningError):
                validate_environment()

    def test_missing_variables(self, monkeypatch):
        monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
        monkeypatch.delenv("HYPRLAND_INSTANCE_SIGNATURE", raising=False)

        with patch("hyprgborder.environment.is_hyprland_running", return_value=True), \
             patch("hyprgborder.environment.get_hyprland_version", return_value=None):
            status = check_environment()
            with pytest.raises(MissingEnvironmentVariableError) as exc_info:
                validate_environment()

        assert status.missing_variables == ["XDG_RUNTIME_DIR", "HYPRLAND_INSTANCE_SIGNATURE"]
        assert status.socket_path is None
        assert exc_info.value.missing == ["XDG_RUNTIME_DIR", "HYPRLAND_INSTANCE_SIGNATURE"]

    def test_socket_missing(self, temp_dir, monkeypatch):
        monkeypatch.setenv("XDG_RUNTIME_DIR", str(temp_dir))
        monkeypatch.setenv("HYPRLAND_INSTANCE_SIGNATURE", SIGNATURE)

        with patch("hyprgborder.environment.is_hyprland_running", return_value=True), \
             patch("hyprgborder.environment.get_hyprland_version", return_value=None):
            with pytest.raises(SocketNotAccessibleError):
                validate_environment()

    def test_regular_file_is_not_a_socket(self, temp_dir, monkeypatch):
        socket_dir = temp_dir / "hypr" / SIGNATURE
        socket_dir.mkdir(parents=True)
        (socket_dir / ".socket.sock").write_text("")
        monkeypatch.setenv("XDG_RUNTIME_DIR", str(temp_dir))
        monkeypatch.setenv("HYPRLAND_INSTANCE_SIGNATURE", SIGNATURE)

        with patch("hyprgborder.environment.is_hyprland_running", return_value=True), \
             patch("hyprgborder.environment.get_hyprland_version", return_value=None):
            assert check_environment().socket_accessible is False


@pytest.mark.unit
class TestFormatEnvironmentStatus:
    """Test the text report."""

    def test_valid_report(self):
        status = EnvironmentStatus(
            hyprland_running=True,
            xdg_runtime_dir="/run/user/1000",
            hyprland_instance_signature=SIGNATURE,
            socket_path=f"/run/user/1000/hypr/{SIGNATURE}/.socket.sock",
            socket_accessible=True,
            hyprland_version="Hyprland 0.41.2",
        )
        report = format_environment_status(status)

        assert "[OK] Hyprland running" in report
        assert "Version: Hyprland 0.41.2" in report
        assert "Problems" not in report

    def test_report_lists_problems(self):
        status = EnvironmentStatus(errors=["Hyprland process not found"])
        report = format_environment_status(status)

        assert "[FAIL] Hyprland running" in report
        assert "XDG_RUNTIME_DIR: not set" in report
        assert "  - Hyprland process not found" in report
