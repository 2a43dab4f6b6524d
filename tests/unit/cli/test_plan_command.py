"""Unit tests for plan CLI command."""

from __future__ import annotations

import pytest

from cli.main import main
from deploy.kubectl_runner import SubprocessRunner
from tests.fixture_paths import plan_fixture


def test_cli_plan_prints_commands_without_running(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Plan should print each kubectl command in order and invoke nothing."""

    def _fail_run(self: SubprocessRunner, argv: object) -> int:
        raise AssertionError("plan must not run kubectl")

    monkeypatch.setattr(SubprocessRunner, "run", _fail_run)
    monkeypatch.setenv("ROLLOUT_ENV", "dev")

    exit_code = main(["plan"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == [
        f"kubectl apply -f etc/kube/gen/dev/{name}.yaml --namespace dev "
        "--record=true --validate=true"
        for name in ("configmap", "server", "prover", "nginx", "ingress")
    ]


def test_cli_plan_uses_plan_file_manifests(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Plan file manifests should replace the default sequence."""
    monkeypatch.setenv("ROLLOUT_ENV", "qa")

    exit_code = main(["plan", "--plan-file", plan_fixture("manifests_only.yaml")])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == [
        "kubectl apply -f etc/kube/gen/qa/configmap.yaml --namespace qa "
        "--record=true --validate=true",
        "kubectl apply -f etc/kube/gen/qa/nginx.yaml --namespace qa "
        "--record=true --validate=true",
    ]
