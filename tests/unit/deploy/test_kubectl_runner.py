"""Unit tests for kubectl process execution."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from core.errors import RolloutDependencyError
from deploy.kubectl_runner import SubprocessRunner, require_binary


def test_require_binary_raises_for_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing executables should raise a dependency error."""
    monkeypatch.setattr("deploy.kubectl_runner.shutil.which", lambda binary: None)

    with pytest.raises(RolloutDependencyError, match="kubectl"):
        require_binary("kubectl")


def test_subprocess_runner_returns_child_exit_status(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runner should run the resolved executable and return its status."""
    captured: dict[str, object] = {}

    def _fake_run(argv: list[str], check: bool) -> subprocess.CompletedProcess[bytes]:
        captured["argv"] = argv
        captured["check"] = check
        return subprocess.CompletedProcess(argv, 5)

    monkeypatch.setattr("deploy.kubectl_runner.shutil.which", lambda binary: "/usr/bin/kubectl")
    monkeypatch.setattr("deploy.kubectl_runner.subprocess.run", _fake_run)

    exit_code = SubprocessRunner().run(("kubectl", "apply", "-f", "a.yaml"))

    assert exit_code == 5 and captured == {
        "argv": ["/usr/bin/kubectl", "apply", "-f", "a.yaml"],
        "check": False,
    }


def test_subprocess_runner_maps_signal_termination(monkeypatch: pytest.MonkeyPatch) -> None:
    """Signal-terminated children should map to 128 + signal number."""
    monkeypatch.setattr("deploy.kubectl_runner.shutil.which", lambda binary: "/usr/bin/kubectl")
    monkeypatch.setattr(
        "deploy.kubectl_runner.subprocess.run",
        lambda argv, check: subprocess.CompletedProcess(argv, -9),
    )

    assert SubprocessRunner().run(("kubectl", "apply")) == 137


def test_subprocess_runner_does_not_start_missing_executable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """No process should start when the executable cannot be resolved."""
    started: list[object] = []
    monkeypatch.setattr("deploy.kubectl_runner.shutil.which", lambda binary: None)
    monkeypatch.setattr(
        "deploy.kubectl_runner.subprocess.run",
        lambda argv, check: started.append(argv),
    )

    with pytest.raises(RolloutDependencyError):
        SubprocessRunner().run(("kubectl", "apply"))

    assert started == []


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts require a POSIX exec")
def test_subprocess_runner_maps_missing_interpreter_to_127(tmp_path: Path) -> None:
    """A script whose interpreter is missing should report 127 instead of raising."""
    script_path = tmp_path / "kubectl"
    script_path.write_text("#!/nonexistent/interp\n", encoding="utf-8")
    script_path.chmod(0o755)

    assert SubprocessRunner().run((str(script_path), "apply")) == 127


def test_subprocess_runner_maps_exec_permission_error_to_126(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Exec failures other than a missing file should report 126."""

    def _fake_run(argv: list[str], check: bool) -> subprocess.CompletedProcess[bytes]:
        raise PermissionError(13, "Permission denied", argv[0])

    monkeypatch.setattr("deploy.kubectl_runner.shutil.which", lambda binary: "/usr/bin/kubectl")
    monkeypatch.setattr("deploy.kubectl_runner.subprocess.run", _fake_run)

    assert SubprocessRunner().run(("kubectl", "apply")) == 126
