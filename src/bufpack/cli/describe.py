"""Packed buffer description CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec.decoder import read_layout


def describe_file(file_path: Path) -> None:
    """Print the header layout of a packed file.

    Args:
        file_path: Path to a file produced by ``pack()``
    """
    layout = read_layout(file_path.read_bytes())

    print("|" * 7, "bufpack: Packed Buffer Sequences", "|" * 7)
    print(f"{layout.count} buffer{'s' if layout.count != 1 else ''} packed.")
    print(f"Header: {layout.header_length} bytes (delimiter included)")
    print(f"Payload: {layout.payload_length} bytes")
    if layout.trailing_length:
        print(f"Trailing: {layout.trailing_length} bytes (ignored)")
    print()

    if not layout.lengths:
        return

    print(f"{'Index':<8}{'Offset':>12}{'Length':>12}")
    print("-" * 32)
    for index, (start, end) in enumerate(layout.offsets()):
        print(f"{index:<8}{start:>12}{end - start:>12}")
