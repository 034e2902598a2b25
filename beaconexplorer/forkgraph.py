"""Layout of the fork tree drawn next to a list of slots.

Slots are fed newest first.  Every open fork occupies a column; a block
that extends an open fork continues that column, a block nobody extends
opens a new column, and columns that meet at a common parent are merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

COLUMN_WIDTH = 20
COLUMN_OFFSET = 10


def _same_root(a: Optional[bytes], b: Optional[bytes]) -> bool:
    return bytes(a or b"") == bytes(b or b"")


@dataclass
class ForkGraph:
    """One column cell of the fork tree for one slot."""

    index: int
    left: int
    block: bool = False
    tiles: set = field(default_factory=set)


@dataclass
class GraphSlot:
    """A slot row in the fork tree; ``status`` is 0 for a missed slot."""

    block_root: Optional[bytes] = None
    parent_root: Optional[bytes] = None
    status: int = 0
    fork_graph: List[ForkGraph] = field(default_factory=list)

    def graph(self, index: int) -> ForkGraph:
        """Return the cell in column ``index``, creating missing cells."""
        while len(self.fork_graph) <= index:
            n = len(self.fork_graph)
            self.fork_graph.append(
                ForkGraph(index=n, left=COLUMN_OFFSET + n * COLUMN_WIDTH)
            )
        return self.fork_graph[index]


class ForkTreeBuilder:
    """Assigns fork-tree cells to slots added from newest to oldest."""

    def __init__(self) -> None:
        self.open_forks: Dict[int, Optional[bytes]] = {}
        self.max_open_fork = 0

    def add_slot(
        self,
        slot: GraphSlot,
        page_slots: Iterable[GraphSlot] = (),
        child_count: Optional[int] = None,
    ) -> None:
        """Lay out ``slot``.

        ``child_count`` is the number of known blocks built on this block;
        it is None on the first page, where nothing newer exists.
        ``page_slots`` are the rows already on the page, which get vertical
        lines up to the top for every such child.
        """
        fork_graph_idx = -1
        free_fork_idx = -1

        for fork_idx in range(self.max_open_fork):
            graph = slot.graph(fork_idx)
            open_root = self.open_forks.get(fork_idx)
            if open_root is None:
                if free_fork_idx == -1:
                    free_fork_idx = fork_idx
                continue
            graph.tiles.add("vline")
            if not _same_root(open_root, slot.block_root):
                continue
            if fork_graph_idx != -1:
                continue
            fork_graph_idx = fork_idx
            self.open_forks[fork_idx] = slot.parent_root
            graph.block = True
            for target in range(fork_idx + 1, self.max_open_fork):
                target_root = self.open_forks.get(target)
                if target_root is None or not _same_root(target_root, slot.block_root):
                    continue
                for idx in range(fork_idx + 1, target + 1):
                    split = slot.graph(idx)
                    if idx == target:
                        split.tiles.update(("tline", "lline", "fork"))
                    else:
                        split.tiles.add("hline")
                graph.tiles.add("rline")
                self.open_forks[target] = None

        if fork_graph_idx != -1 or slot.status <= 0:
            return

        has_head = False
        if child_count:
            free_fork_idx = self.max_open_fork
            self.max_open_fork += 1
            has_head = True
            for n in range(1, child_count):
                graph_idx = self.max_open_fork
                self.max_open_fork += 1
                split = slot.graph(graph_idx)
                split.tiles.update(("tline", "lline", "fork"))
                if n < child_count - 1:
                    split.tiles.add("hline")
            for other in page_slots:
                if _same_root(other.block_root, slot.block_root):
                    continue
                for n in range(child_count):
                    other.graph(free_fork_idx + n).tiles.add("vline")

        if free_fork_idx == -1:
            free_fork_idx = self.max_open_fork
            self.max_open_fork += 1
        self.open_forks[free_fork_idx] = slot.parent_root
        graph = slot.graph(free_fork_idx)
        graph.block = True
        graph.tiles.add("vline" if has_head else "bline")

    def width(self) -> int:
        """Pixel width needed to draw every column opened so far."""
        return self.max_open_fork * COLUMN_WIDTH + COLUMN_WIDTH


__all__ = ["ForkGraph", "GraphSlot", "ForkTreeBuilder"]