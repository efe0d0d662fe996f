"""Command that decodes a baseline JPEG into a PGM or PPM file."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .bitstream import BitStream, BitStreamError
from .blocks import read_scan_data
from .colour_image import process_colour_image
from .grayscale import process_grayscale_image
from .metadata import JpegFormatError, read_metadata

USAGE = "usage: jpegdecode <jpeg file> [--loeffler | --classic]"


def decode_file(path: str | os.PathLike, use_loeffler: bool = True) -> str:
    """Decode the JPEG at ``path`` and return the path of the written image."""
    with open(path, "rb") as f:
        meta = read_metadata(f)
        data = read_scan_data(f, meta.data_position)
    meta.stream = BitStream(data)
    meta.image_name = str(path)

    if meta.scan_component_count == 1:
        return process_grayscale_image(meta, path, use_loeffler)
    if meta.scan_component_count == 3:
        return process_colour_image(meta, path, use_loeffler)
    raise JpegFormatError(
        f"the image does not have a valid number of components "
        f"({meta.scan_component_count})"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the decoder; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    path, *options = args
    use_loeffler = True
    for option in options:
        if option == "--loeffler":
            use_loeffler = True
        elif option == "--classic":
            use_loeffler = False
        else:
            print(f"unknown option: {option}", file=sys.stderr)
            return 1

    try:
        decode_file(path, use_loeffler)
    except OSError as exc:
        print(f"cannot open {path}: {exc}", file=sys.stderr)
        return 1
    except (JpegFormatError, BitStreamError, ValueError) as exc:
        print(f"cannot decode {path}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())