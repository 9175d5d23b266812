"""Classes for the nodes, cells and tissue."""

from tissuemech.data._tissue import (
    BoundaryCell,
    Cell,
    CellKind,
    Membrane,
    Node,
    NodeCell,
    Tissue,
)

__all__ = [
    "BoundaryCell",
    "Cell",
    "CellKind",
    "Membrane",
    "Node",
    "NodeCell",
    "Tissue",
]
