"""Timing of the decoder, fast and classic IDCT, over a directory of JPEG files."""

from __future__ import annotations

import argparse
import os
import shlex
import shutil
import subprocess
import sys
import time
from typing import Sequence

DEFAULT_IMAGES = "../images/"
REPETITIONS = 5
JPEG_EXTENSIONS = ("jpg", "jpeg")


def has_jpeg_extension(name: str) -> bool:
    """True when ``name`` ends in .jpg or .jpeg, in any case."""
    _, dot, extension = name.rpartition(".")
    return bool(dot) and extension.lower() in JPEG_EXTENSIONS


def is_regular_file(path: str | os.PathLike) -> bool:
    """True when ``path`` exists and is a regular file."""
    return os.path.isfile(path)


def measure_runtime(args: Sequence[str], repetitions: int = REPETITIONS) -> float:
    """Run ``args`` ``repetitions`` times and return the mean wall time in ms.

    Raises :class:`subprocess.CalledProcessError` if any run fails.
    """
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")
    total = 0.0
    for _ in range(repetitions):
        start = time.perf_counter()
        subprocess.run(list(args), check=True)
        total += time.perf_counter() - start
    return total * 1000.0 / repetitions


def main(argv: Sequence[str] | None = None) -> int:
    """Time the decoder on every JPEG of a directory; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="jpegdecode-benchmark",
        description="Compare the decoding time of the fast and classic IDCT.",
    )
    parser.add_argument("--images", default=DEFAULT_IMAGES, help="directory of JPEG files")
    parser.add_argument("--decoder", help="decoder command line (defaults to this package's)")
    parser.add_argument("--repetitions", type=int, default=REPETITIONS)
    options = parser.parse_args(argv)

    print(f"Current directory: {os.getcwd()}\n")

    decoder = (
        shlex.split(options.decoder)
        if options.decoder
        else [sys.executable, "-m", "jpegdecode.cli"]
    )
    if not decoder or shutil.which(decoder[0]) is None:
        print(f"error: decoder {options.decoder!r} not found or not executable", file=sys.stderr)
        return 1

    try:
        names = sorted(os.listdir(options.images))
    except OSError as exc:
        print(f"error: cannot open {options.images}: {exc}", file=sys.stderr)
        return 1

    count = options.repetitions
    for name in names:
        path = os.path.join(options.images, name)
        if not (has_jpeg_extension(name) and is_regular_file(path)):
            continue
        print(f"Image: {path}")

        try:
            fast = measure_runtime([*decoder, path], count)
        except (subprocess.CalledProcessError, OSError):
            print("  error: fast decoding failed\n")
            continue
        try:
            classic = measure_runtime([*decoder, path, "--classic"], count)
        except (subprocess.CalledProcessError, OSError):
            print("  error: classic decoding failed\n")
            continue

        print(f"  fast:    {fast:.3f} ms (mean of {count})")
        print(f"  classic: {classic:.3f} ms (mean of {count})\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())