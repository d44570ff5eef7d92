import io
import os
import signal
import subprocess
import sys

import pytest

from unixkit.shell import cd, echo, execute, fork_exec, handle_pipes, kill, ps, pwd


def test_echo_quotes():
    assert echo('echo "aboba"'.split()) == "aboba"
    assert echo("echo 'aboba'".split()) == "aboba"
    assert echo("echo aboba".split()) == "aboba"


def test_echo_text():
    assert echo("echo aboba\\nlol\\tsus".split()) == "aboba\nlol\tsus"
    assert echo('echo ""'.split()) == ""


def test_echo_joins_with_spaces():
    assert echo(["echo", "one", "two", "three"]) == "one two three"


def test_echo_keeps_invalid_escape():
    assert echo(["echo", "a\\qb"]) == "a\\qb"


def test_echo_octal_and_unicode_escapes():
    assert echo(["echo", "\\101\\u0042"]) == "AB"


def test_pwd_builtin():
    buffer = io.StringIO()
    execute(["pwd"], None, buffer)
    assert buffer.getvalue() == os.getcwd() + "\n"
    assert pwd() == os.getcwd()


def test_ps_lists_current_process():
    buffer = io.StringIO()
    ps(buffer)
    text = buffer.getvalue()
    assert text.startswith("PID\t TIME\t CMD\n")
    pids = {line.split("\t")[0] for line in text.splitlines()[1:]}
    assert str(os.getpid()) in pids


def test_fork_exec_output():
    buffer = io.StringIO()
    execute([sys.executable, "-c", "print('hi')"], None, buffer)
    assert buffer.getvalue() == "hi\n"


def test_fork_exec_reports_exit_status():
    buffer = io.StringIO()
    fork_exec([sys.executable, "-c", "import sys; sys.exit(3)"], None, buffer)
    assert buffer.getvalue() == "exit status 3\n"


def test_fork_exec_missing_program():
    buffer = io.StringIO()
    fork_exec(["no-such-program-here"], None, buffer)
    assert buffer.getvalue() == (
        'exec: "no-such-program-here": executable file not found in $PATH\n'
    )


def test_cd_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    buffer = io.StringIO()
    execute(["cd"], None, buffer)
    assert buffer.getvalue() == ""
    assert os.path.realpath(pwd()) == os.path.realpath(home)


def test_cd_to_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    cd(["cd", str(target)])
    assert os.path.realpath(pwd()) == os.path.realpath(target)


def test_cd_missing_directory_reports(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cd(["cd", "absent-dir"])
    assert "absent-dir" in capsys.readouterr().out
    assert os.path.realpath(pwd()) == os.path.realpath(tmp_path)


def test_kill():
    process = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(10)"])
    kill(["kill", str(process.pid)])
    assert process.wait(timeout=5) == -signal.SIGKILL


def test_kill_not_enough_arguments(capsys):
    kill(["kill"])
    assert capsys.readouterr().out == "kill: not enough arguments\n"


def test_kill_invalid_pid(capsys):
    kill(["kill", "abc"])
    assert capsys.readouterr().out == 'kill: invalid process id "abc"\n'


def test_pipeline(tmp_path):
    script = tmp_path / "upper.py"
    script.write_text(
        "import sys\nprint(sys.stdin.read().upper(), end='')\n", encoding="utf-8"
    )
    buffer = io.StringIO()
    handle_pipes(f"echo hello | {sys.executable} {script}", buffer)
    assert buffer.getvalue() == "HELLO\n"


def test_pipeline_skips_empty_stage():
    buffer = io.StringIO()
    handle_pipes("echo one | | echo two", buffer)
    assert buffer.getvalue() == "two\n"


def test_execute_empty_command():
    with pytest.raises(ValueError):
        execute([], None, io.StringIO())


def test_exit_builtin():
    with pytest.raises(SystemExit) as info:
        handle_pipes("\\exit", io.StringIO())
    assert info.value.code == 0