"""Text rendering of weights, report file names and adjacency lists."""

from __future__ import annotations

import math
import struct

from graphdata.graph import AdjacencyList

_FLOAT32 = struct.Struct("<f")


def _to_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _shortest_digits(value: float) -> tuple[str, int]:
    """Shortest decimal digits and exponent that round-trip at single precision."""
    for precision in range(1, 10):
        text = f"{value:.{precision - 1}e}"
        if _to_float32(float(text)) == value:
            break
    mantissa, exponent = text.split("e")
    digits = mantissa.replace(".", "").rstrip("0") or "0"
    return digits, int(exponent)


def format_float(value: float) -> str:
    """Render a single-precision value in its shortest round-trip form.

    Fixed notation is used unless scientific notation is strictly shorter.
    """
    value = _to_float32(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign = "-" if value < 0 else ""
    digits, exponent = _shortest_digits(abs(value))

    scientific = digits[0]
    if len(digits) > 1:
        scientific += "." + digits[1:]
    scientific += f"e{'-' if exponent < 0 else '+'}{abs(exponent):02d}"

    if exponent >= 0:
        if len(digits) <= exponent + 1:
            fixed = digits + "0" * (exponent + 1 - len(digits))
        else:
            fixed = digits[: exponent + 1] + "." + digits[exponent + 1:]
    else:
        fixed = "0." + "0" * (-exponent - 1) + digits

    return sign + (scientific if len(scientific) < len(fixed) else fixed)


def output_name(file_number: str, threshold: float, suffix: str) -> str:
    """Name of a report file for a data set and weight threshold.

    A threshold of exactly one is written as ``1.`` followed by the dot of
    the suffix, giving names such as ``pairs501_1..cc``.
    """
    if _to_float32(threshold) == 1:
        return f"pairs{file_number}_1..{suffix}"
    return f"pairs{file_number}_{format_float(threshold)}.{suffix}"


def format_adjacency_list(graph: AdjacencyList) -> str:
    """Render the adjacency lists in the report file layout."""
    parts = [f"<<< There are {len(graph)} IDs in total. >>>\n"]
    for index, (vertex, edges) in enumerate(graph.items(), start=1):
        parts.append(f"[{index:>3}] {vertex}: \n")
        for position, edge in enumerate(edges, start=1):
            parts.append(f"\t({position:>2}) {edge.id},{format_float(edge.weight):>7}")
            if position % 12 == 0:
                parts.append("\n")
        parts.append("\n")
    parts.append(
        f"<<< There are {graph.node_count()} nodes in adjacency lists. >>>\n"
    )
    return "".join(parts)