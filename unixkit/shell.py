"""A small interactive shell with built-in commands and pipelines."""

from __future__ import annotations

import io
import os
import re
import signal
import subprocess
import sys
from pathlib import Path
from typing import TextIO

import psutil

_SIMPLE_ESCAPES = {
    "a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r",
    "t": "\t", "v": "\v", "\\": "\\", '"': '"',
}
_ESCAPE_PATTERN = re.compile(
    r'\\(?:(?P<simple>[abfnrtv\\"])|(?P<oct>[0-7]{3})|x(?P<hex>[0-9a-fA-F]{2})'
    r'|u(?P<u4>[0-9a-fA-F]{4})|U(?P<u8>[0-9a-fA-F]{8}))'
    r'|(?P<text>[^\\"\n]+)'
)
_INTEGER = re.compile(r"[+-]?[0-9]+")
_KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)


def _unescape(body: str) -> str:
    """Interpret backslash escapes; raise ``ValueError`` if ``body`` is malformed."""
    out = bytearray()
    position = 0
    for piece in _ESCAPE_PATTERN.finditer(body):
        if piece.start() != position:
            break
        position = piece.end()
        if piece["text"] is not None:
            out += piece["text"].encode("utf-8", "surrogateescape")
        elif piece["simple"] is not None:
            out += _SIMPLE_ESCAPES[piece["simple"]].encode()
        elif piece["oct"] is not None:
            value = int(piece["oct"], 8)
            if value > 0xFF:
                raise ValueError(f"octal escape out of range: {piece[0]}")
            out.append(value)
        elif piece["hex"] is not None:
            out.append(int(piece["hex"], 16))
        else:
            value = int(piece["u4"] or piece["u8"], 16)
            if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                raise ValueError(f"invalid unicode escape: {piece[0]}")
            out += chr(value).encode()
    if position != len(body):
        raise ValueError(f"invalid escape sequence in {body!r}")
    return out.decode("utf-8", "surrogateescape")


def echo(args: list[str]) -> str:
    """Join the arguments after the command name, stripping quotes and expanding escapes."""
    words = []
    for word in args[1:]:
        word = word.strip('"').strip("'")
        try:
            word = _unescape(word)
        except ValueError:
            pass
        words.append(word)
    return " ".join(words)


def pwd() -> str:
    """Return the current working directory, or the error text if it is unavailable."""
    try:
        return os.getcwd()
    except OSError as exc:
        return str(exc)


def kill(args: list[str]) -> None:
    """Kill each process whose id follows the command name; problems are reported."""
    if len(args) < 2:
        print("kill: not enough arguments")
        return
    for text in args[1:]:
        if not _INTEGER.fullmatch(text) or int(text) <= 0:
            print(f'kill: invalid process id "{text}"')
            continue
        try:
            os.kill(int(text), _KILL_SIGNAL)
        except OSError as exc:
            print(exc)


def ps(out: TextIO) -> None:
    """Write the id, CPU time and command line of every running process."""
    out.write("PID\t TIME\t CMD\n")
    try:
        processes = list(psutil.process_iter())
    except psutil.Error as exc:
        print(exc, file=out)
        return
    for process in processes:
        try:
            times = process.cpu_times()
            total = times.user + times.system
        except psutil.Error:
            total = 0.0
        try:
            command = " ".join(process.cmdline())
        except psutil.Error:
            command = ""
        out.write(f"{process.pid}\t {total:.2f}\t {command}\n")


def cd(args: list[str]) -> None:
    """Change directory; with no argument or ``~`` go to the home directory."""
    if len(args) == 1 or args[1] == "~":
        try:
            target = str(Path.home())
        except (RuntimeError, KeyError) as exc:
            print(exc)
            return
    else:
        target = args[1]
    try:
        os.chdir(target)
    except OSError as exc:
        print(exc)


def _describe_status(code: int) -> str:
    if code < 0:
        try:
            return f"signal: {signal.Signals(-code).name}"
        except ValueError:
            return f"signal: {-code}"
    return f"exit status {code}"


def fork_exec(args: list[str], stdin: str | None, out: TextIO) -> None:
    """Run an external program, feeding it ``stdin`` and writing its output to ``out``."""
    try:
        result = subprocess.run(
            args,
            input=stdin,
            stdin=subprocess.DEVNULL if stdin is None else None,
            stdout=subprocess.PIPE,
            text=True,
        )
    except FileNotFoundError:
        print(f'exec: "{args[0]}": executable file not found in $PATH', file=out)
        return
    except OSError as exc:
        print(exc, file=out)
        return
    if result.returncode != 0:
        print(_describe_status(result.returncode), file=out)
    output = result.stdout.rstrip("\n")
    if output:
        print(output, file=out)


def execute(args: list[str], stdin: str | None, out: TextIO) -> None:
    """Run one command: a built-in if it is one, otherwise an external program."""
    if not args:
        raise ValueError("empty command")
    name = args[0]
    if name == "pwd":
        print(pwd(), file=out)
    elif name == "echo":
        print(echo(args), file=out)
    elif name == "kill":
        kill(args)
    elif name == "ps":
        ps(out)
    elif name == "cd":
        cd(args)
    elif name == "\\exit":
        raise SystemExit(0)
    else:
        fork_exec(args, stdin, out)


def handle_pipes(line: str, out: TextIO | None = None) -> None:
    """Run a line of commands joined by ``|``, passing each one's output to the next."""
    if not line:
        return
    out = out if out is not None else sys.stdout
    stages = line.split("|")
    previous: str | None = None
    for position, stage in enumerate(stages):
        if not stage.strip():
            continue
        words = stage.split()
        if position == len(stages) - 1:
            execute(words, previous, out)
        else:
            buffer = io.StringIO()
            execute(words, previous, buffer)
            previous = buffer.getvalue()


def main(argv: list[str] | None = None) -> int:
    while True:
        print(f">/{os.path.basename(pwd())} ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return 0
        handle_pipes(line.rstrip("\n"))


if __name__ == "__main__":
    sys.exit(main())