"""Basic usage of bufpack.

Packs a few payloads of different buffer types into a single buffer, inspects
the header, and splits the buffer back apart.
"""

from __future__ import annotations

from array import array

from bufpack import MalformedHeaderError, pack, packed_size, read_layout, unpack


def main() -> None:
    readings = array("h", [120, -40, 7])
    payloads = [b"sensor-7", readings, b"", bytearray(b"\x00\xff\x00")]

    packed = pack(payloads)
    print(f"Packed {len(payloads)} buffers into {len(packed)} bytes")
    print(f"Predicted size: {packed_size(payloads)} bytes")
    print(f"Header: {packed[: packed.index(0)]!r}")

    layout = read_layout(packed)
    for index, (start, end) in enumerate(layout.offsets()):
        print(f"  buffer {index}: bytes [{start}, {end})")

    name, raw_readings, empty, blob = unpack(packed)
    assert name == b"sensor-7"
    assert array("h", raw_readings) == readings
    assert empty == b""
    assert blob == b"\x00\xff\x00"
    print("Round trip OK")

    try:
        unpack(b"not packed")
    except MalformedHeaderError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
