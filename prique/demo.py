"""Demonstration of the heap and both priority-queue strategies."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from prique.heap import Heap
from prique.pair import Pair
from prique.queue import HeapStrategy, ListStrategy, Prique


def _queue_section(title: str, queue: Prique) -> list[str]:
    lines = [title]
    queue.insert(1, "cos")
    queue.insert(2, "krowa")
    queue.insert(5, "pies")
    queue.insert(0, "kura")
    queue.insert(100, "bóbr")
    queue.modify_key("kura", 200)
    for _ in range(5):
        lines.append(str(queue))
        lines.append(str(queue.extract_max()))
        lines.append("")
    return lines


def run_demo() -> str:
    """Run the demonstration and return everything it prints."""
    heap = Heap(
        [
            Pair(1, "cos"),
            Pair(4, "cos"),
            Pair(10, "cos"),
            Pair(2, "aha"),
            Pair(0, "krowa"),
            Pair(12, "kot"),
            Pair(8, "pies"),
            Pair(7, "tan"),
            Pair(3, "sin"),
        ]
    )
    lines = [str(heap)]
    heap.decrease_key("krowa", 10)
    while len(heap) > 0:
        lines.append(str(heap.extract_max()))

    lines += _queue_section("List queue:", Prique(ListStrategy()))
    lines += _queue_section("Heap queue:", Prique(HeapStrategy()))
    return "\n".join(lines) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="prique",
        description="Show a max-heap and list- and heap-backed priority queues at work.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, run the demonstration and print its output."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    sys.stdout.write(run_demo())
    return 0