"""Structural pattern: a facade starting a computer's parts."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field


class CPU:
    def start(self) -> str:
        return "CPU is started"


class RAM:
    def start(self) -> str:
        return "RAM is started"


class VideoRAM:
    def start(self) -> str:
        return "Video RAM is started"


@dataclass
class Computer:
    """One entry point that starts every part in order."""

    cpu: CPU = field(default_factory=CPU)
    ram: RAM = field(default_factory=RAM)
    vram: VideoRAM = field(default_factory=VideoRAM)

    def start(self) -> str:
        """Start each part and return the report, one line per step."""
        steps = [self.cpu.start(), self.ram.start(), self.vram.start(), "Computer is started"]
        return "\n".join(steps)


def main(argv: list[str] | None = None) -> int:
    """Start a computer through its facade and print the report."""
    parser = argparse.ArgumentParser(
        prog="facade", description="Start a computer through a single facade."
    )
    parser.parse_args(argv)
    report = Computer().start()
    sys.stdout.write(report + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())