"""Main CLI entry point for bufpack."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec import pack, unpack
from ..exceptions import BufpackError
from .describe import describe_file

logger = logging.getLogger(__name__)


def _pack_files(sources: list[str], output: str) -> None:
    paths = [Path(source) for source in sources]
    for path in paths:
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

    packed = pack([path.read_bytes() for path in paths])
    Path(output).write_bytes(packed)
    logger.info("Wrote %d bytes to %s", len(packed), output)


def _unpack_file(source: str, directory: str) -> None:
    buffers = unpack(Path(source).read_bytes())

    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    for index, buffer in enumerate(buffers):
        target = out_dir / f"part-{index}.bin"
        target.write_bytes(buffer)
        print(target)
    logger.info("Unpacked %d buffers into %s", len(buffers), out_dir)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bufpack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="bufpack: Packed Buffer Sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bufpack --pack a.bin b.bin -o out.pack   Pack files into one buffer
  bufpack --unpack out.pack -d parts/      Split a packed file apart
  bufpack --inspect out.pack               Show header layout
  bufpack --version                        Show version
        """,
    )

    parser.add_argument(
        "--pack",
        metavar="FILE",
        nargs="+",
        help="Pack files, in order, into the --output file",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file for --pack",
    )
    parser.add_argument(
        "--unpack",
        metavar="FILE",
        help="Unpack a packed file into the --directory",
    )
    parser.add_argument(
        "-d",
        "--directory",
        metavar="DIR",
        default=".",
        help="Output directory for --unpack (default: current directory)",
    )
    parser.add_argument(
        "--inspect",
        metavar="FILE",
        help="Show the header layout of a packed file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bufpack {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.pack:
            if not args.output:
                print("Error: --pack requires --output", file=sys.stderr)
                return 1
            _pack_files(args.pack, args.output)
            return 0

        if args.unpack:
            _unpack_file(args.unpack, args.directory)
            return 0

        if args.inspect:
            describe_file(Path(args.inspect))
            return 0
    except (BufpackError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
