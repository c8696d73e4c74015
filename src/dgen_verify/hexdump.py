"""Hex rendering and byte scanning for corruption reports."""
from dgen_core.protocol import HEX_WINDOW


def hex_window(data, start: int, width: int = HEX_WINDOW) -> str:
    """Render up to ``width`` bytes of ``data`` from ``start`` as spaced hex pairs."""
    return " ".join(f"{b:02x}" for b in bytes(data[start:start + width]))


def first_difference(expected, actual) -> int:
    """Index of the first differing byte, or -1 if none within the shorter input."""
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return i
    return -1
