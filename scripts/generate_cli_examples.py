from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

EXAMPLES_ROOT = Path("examples/cli-options")
BASE_ARGS = ["--size", "160x120"]


@dataclass
class Example:
    name: str
    output: Path
    args: list[str]

    def full_args(self) -> list[str]:
        return [sys.executable, "render.py", str(self.output), *self.args]


EXAMPLES: list[Example] = [
    Example(
        name="defaults",
        output=EXAMPLES_ROOT / "defaults" / "seahorse.png",
        args=[*BASE_ARGS],
    ),
    Example(
        name="size",
        output=EXAMPLES_ROOT / "size" / "wide.png",
        args=["--size", "320x120"],
    ),
    Example(
        name="whole-set",
        output=EXAMPLES_ROOT / "whole-set" / "overview.png",
        args=[*BASE_ARGS, "--upper-left=-2.5,1.2", "--lower-right=1,-1.2"],
    ),
    Example(
        name="format",
        output=EXAMPLES_ROOT / "format" / "custom",
        args=[*BASE_ARGS, "--format", "bmp"],
    ),
    Example(
        name="band-rows",
        output=EXAMPLES_ROOT / "band-rows" / "single-row-bands.png",
        args=[*BASE_ARGS, "--band-rows", "1"],
    ),
    Example(
        name="tensor",
        output=EXAMPLES_ROOT / "tensor" / "vectorized.png",
        args=[*BASE_ARGS, "--backend", "tensor"],
    ),
    Example(
        name="verbose",
        output=EXAMPLES_ROOT / "verbose" / "diagnostic.png",
        args=[*BASE_ARGS, "--verbose"],
    ),
]


def _ensure_clean(paths: Iterable[Path]) -> None:
    for path in paths:
        if path.exists():
            shutil.rmtree(path)


def _expected_path(example: Example) -> Path:
    if example.output.suffix:
        return example.output
    fmt = example.args[example.args.index("--format") + 1] if "--format" in example.args else "png"
    return example.output.with_suffix(f".{fmt}")


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _ensure_clean([example.output.parent])
        subprocess.run(example.full_args(), check=True)
        expected = _expected_path(example)
        if not expected.is_file():
            raise RuntimeError(f"Expected file {expected} was not created")
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()
