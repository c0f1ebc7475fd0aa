import pytest
from click.testing import CliRunner
from rich.console import Console

from setupcheck import __version__, cli as cli_module
from setupcheck.cli import cli
from setupcheck.config import VerifierConfig
from setupcheck.preflight import checker as checker_module
from setupcheck.preflight.checker import FAILURE_BANNER, READY_BANNER


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr(cli_module, "console", Console(force_terminal=False, width=200))
    for field_name in VerifierConfig.model_fields:
        monkeypatch.delenv("SETUPCHECK_" + field_name.upper(), raising=False)
    return CliRunner()


@pytest.fixture
def fake_git(monkeypatch, make_probe):
    def install(**outputs):
        probe = make_probe(**outputs)
        monkeypatch.setattr(checker_module, "GitProbe", lambda command: probe)
        return probe
    return install


def test_all_checks_pass(runner, fake_git, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    fake_git()

    result = runner.invoke(cli, [], input="y\n")

    assert result.exit_code == 0
    assert "Checking shell..." in result.output
    assert "[OK] Your default shell is zsh" in result.output
    assert "[OK] Your default git version is 2.39.1" in result.output
    assert "[OK] git email is included in Github emails" in result.output
    assert "[OK] VS Code is your default git editor" in result.output
    assert result.output.rstrip().endswith(READY_BANNER)


def test_failure_keeps_exit_code_zero(runner, fake_git, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/bash")
    fake_git()

    result = runner.invoke(cli, [], input="n\n")

    assert result.exit_code == 0
    assert "[KO] Your default shell is /bin/bash, but should be zsh" in result.output
    assert "[KO] Add dev@example.com to your GitHub account" in result.output
    assert result.output.rstrip().endswith(FAILURE_BANNER)


def test_strict_exit_code(runner, fake_git, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/bash")
    fake_git()

    result = runner.invoke(cli, ["--strict"], input="y\n")
    assert result.exit_code == 1


def test_strict_passes_when_only_skipped(runner, fake_git, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    fake_git(editor=None)

    result = runner.invoke(cli, ["--strict", "--verbose"], input="yes\n")

    assert result.exit_code == 0
    assert "Test not available for now..." in result.output
    assert "PASSED: 3/4 checks passed (0 failed, 1 not verified)" in result.output


def test_invalid_config(runner, fake_git, monkeypatch):
    monkeypatch.setenv("SETUPCHECK_REQUIRED_GIT_VERSION", "latest")
    probe = fake_git()

    result = runner.invoke(cli, [])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert probe.calls == []


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.fixture
def shell_overrides(monkeypatch):
    monkeypatch.setenv("SETUPCHECK_EDITOR_NAME", "Vim")
    monkeypatch.setenv("SETUPCHECK_EMAILS_URL", "https://example.com/emails")


def test_environment_overrides_are_cleared(shell_overrides, runner, fake_git, monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    fake_git()

    result = runner.invoke(cli, [], input="y\n")

    assert "[OK] VS Code is your default git editor" in result.output
    assert "Please go to https://github.com/settings/emails" in result.output


def test_module_console_does_not_wrap():
    assert cli_module.console.soft_wrap is True
