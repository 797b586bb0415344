import logging
import subprocess

import pytest

from prsummary.infra.shell.executor import ShellExecutor, run_command


def test_run_command_returns_trimmed_stdout(fake_git):
    """Output is stripped of surrounding whitespace"""
    fake = fake_git({'rev-parse --abbrev-ref HEAD': '  feature/login\n\n'})
    assert run_command('git', 'rev-parse', '--abbrev-ref', 'HEAD') == 'feature/login'
    assert fake.calls == [['git', 'rev-parse', '--abbrev-ref', 'HEAD']]


def test_run_command_exits_on_nonzero_status(fake_git, caplog):
    """A failing command terminates the process with status 1"""
    fake_git({}, failing=['log main..HEAD'])
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as excinfo:
            run_command('git', 'log', 'main..HEAD')
    assert excinfo.value.code == 1
    assert 'Error executing command' in caplog.text
    assert 'fatal: bad revision' in caplog.text


def test_run_command_exits_when_program_is_missing(monkeypatch):
    def missing(command, **kwargs):
        raise FileNotFoundError(2, 'No such file or directory', command[0])

    monkeypatch.setattr(subprocess, 'run', missing)
    with pytest.raises(SystemExit) as excinfo:
        run_command('definitely-not-installed')
    assert excinfo.value.code == 1


def test_run_command_rejects_unsafe_names(fake_git):
    fake = fake_git({})
    with pytest.raises(SystemExit):
        run_command('git;rm', '-rf')
    assert fake.calls == []


@pytest.mark.parametrize('name', ['../bin/git', '/usr/bin/git', 'git|cat', 'a`b`', ''])
def test_validate_command_rejects(name):
    with pytest.raises(ValueError):
        ShellExecutor._validate_command(name)


def test_git_exec_raises_instead_of_exiting(fake_git):
    """The non-fatal primitive leaves error handling to the caller"""
    fake_git({}, failing=['rev-parse --show-toplevel'])
    with pytest.raises(subprocess.CalledProcessError):
        ShellExecutor.git_exec(['rev-parse', '--show-toplevel'])
