from enum import Enum, auto
from typing import Sequence

import torch

DTYPE = torch.float64


def _as_vector(value, name: str) -> torch.Tensor:
    """Convert a 2D vector to a float64 tensor with shape (2,)."""
    vector = torch.as_tensor(value, dtype=DTYPE).clone()
    if vector.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {tuple(vector.shape)}")
    return vector


class Node:
    """A point in the tissue that accumulates forces.

    Parameters
    ----------
    position : torch.Tensor | Sequence[float]
        (2,) array giving the position of the node.
    node_id : int | None
        Optional identifier used in log messages.
        Default value is None.
    """

    def __init__(self, position, node_id: int | None = None):
        self._position = _as_vector(position, "position")
        self._force = torch.zeros(2, dtype=DTYPE)
        self.node_id = node_id

    @property
    def position(self) -> torch.Tensor:
        """Get the node position."""
        return self._position

    @position.setter
    def position(self, position):
        """Set the node position."""
        self._position = _as_vector(position, "position")

    @property
    def force(self) -> torch.Tensor:
        """Get the force accumulated this step."""
        return self._force

    def add_force_contribution(self, force: torch.Tensor):
        """Add a force to the accumulator.

        Parameters
        ----------
        force : torch.Tensor
            (2,) array containing the force vector to add.
        """
        self._force = self._force + _as_vector(force, "force")

    def reset_force(self):
        """Set the accumulated force to zero."""
        self._force = torch.zeros(2, dtype=DTYPE)

    def __repr__(self) -> str:
        x, y = self._position.tolist()
        return f"Node(id={self.node_id}, position=({x:g}, {y:g}))"


class CellKind(Enum):
    """The kinds of cells that can make up a tissue."""

    NODE_CELL = auto()
    BOUNDARY_CELL = auto()


class Cell:
    """Base class for the cells in a tissue.

    Parameters
    ----------
    kind : CellKind
        The discriminant for this cell.
    nodes : Sequence[Node]
        The nodes owned by this cell.
    """

    def __init__(self, kind: CellKind, nodes: Sequence[Node]):
        self._kind = kind
        self._nodes = tuple(nodes)

    @property
    def kind(self) -> CellKind:
        """Get the kind of cell."""
        return self._kind

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Get the nodes owned by this cell."""
        return self._nodes

    def single_node(self) -> Node | None:
        """Get the node of a single node cell.

        Returns
        -------
        node : Node | None
            The node if this is a node cell, otherwise None.
        """
        if self._kind is CellKind.NODE_CELL:
            return self._nodes[0]
        return None


class NodeCell(Cell):
    """A cell represented by a single mechanical point.

    Parameters
    ----------
    node : Node
        The node of the cell.
    """

    def __init__(self, node: Node):
        super().__init__(CellKind.NODE_CELL, (node,))

    @property
    def node(self) -> Node:
        """Get the node of the cell."""
        return self._nodes[0]


class BoundaryCell(Cell):
    """A cell whose shape is described by several nodes."""

    def __init__(self, nodes: Sequence[Node]):
        super().__init__(CellKind.BOUNDARY_CELL, nodes)


class Membrane:
    """The boundary that encloses a tissue.

    Parameters
    ----------
    nodes : Sequence[Node]
        The nodes making up the membrane, in order.
    """

    def __init__(self, nodes: Sequence[Node]):
        self._nodes = tuple(nodes)

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Get the membrane nodes."""
        return self._nodes

    def centre(self) -> torch.Tensor:
        """Compute the mean position of the membrane nodes.

        Returns
        -------
        centre : torch.Tensor
            (2,) array containing the centre of the membrane.
        """
        if len(self._nodes) == 0:
            raise ValueError("Cannot compute the centre of a membrane with no nodes.")
        positions = torch.stack([node.position for node in self._nodes])
        return positions.mean(dim=0)


class Tissue:
    """An ordered collection of cells enclosed by a membrane.

    The order of the cells is used as the iteration order by the
    force laws, so it should not change during a simulation step.

    Parameters
    ----------
    cells : Sequence[Cell]
        The cells in the tissue.
    membrane : Membrane
        The membrane enclosing the cells.
    """

    def __init__(self, cells: Sequence[Cell], membrane: Membrane):
        self.cell_list = list(cells)
        self.membrane = membrane

    def cells(self) -> tuple[Cell, ...]:
        """Get the cells in order."""
        return tuple(self.cell_list)

    def membrane_nodes(self) -> tuple[Node, ...]:
        """Get the membrane nodes in order."""
        return self.membrane.nodes

    def node_cells(self) -> tuple[Cell, ...]:
        """Get the cells that have a single node."""
        return tuple(cell for cell in self.cell_list if cell.single_node() is not None)

    def node_positions(self) -> torch.Tensor:
        """Get the positions of the node cells.

        Returns
        -------
        positions : torch.Tensor
            (n_node_cells, 2) array of the positions of the node cells.
        """
        positions = [cell.single_node().position for cell in self.node_cells()]
        if len(positions) == 0:
            return torch.zeros((0, 2), dtype=DTYPE)
        return torch.stack(positions)

    def node_forces(self) -> torch.Tensor:
        """Get the accumulated forces of the node cells.

        Returns
        -------
        forces : torch.Tensor
            (n_node_cells, 2) array of the forces on the node cells.
        """
        forces = [cell.single_node().force for cell in self.node_cells()]
        if len(forces) == 0:
            return torch.zeros((0, 2), dtype=DTYPE)
        return torch.stack(forces)

    def reset_forces(self):
        """Set the accumulated force of every cell and membrane node to zero."""
        for cell in self.cell_list:
            for node in cell.nodes:
                node.reset_force()
        for node in self.membrane.nodes:
            node.reset_force()
