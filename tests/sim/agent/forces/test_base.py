import math

import pytest
import torch

from tissuemech.data import Membrane, Node, NodeCell, Tissue
from tissuemech.sim.agent.forces import ConstantRadialPressure, Force, apply_forces


class ConstantForce(Force):
    """Add the same force to every node cell."""

    def __init__(self, force: list[float]):
        self.force = torch.tensor(force, dtype=torch.float64)
        self.n_calls = 0

    def apply_tissue_forces(self, tissue: Tissue) -> None:
        self.n_calls += 1
        for cell in tissue.node_cells():
            cell.single_node().add_force_contribution(self.force)


def test_force_is_abstract():
    """The base force cannot be instantiated."""
    with pytest.raises(TypeError):
        Force()


def test_apply_forces():
    """Forces applied to a tissue add into the node accumulators."""
    membrane = Membrane(
        [Node([20.0, 0.0]), Node([0.0, 20.0]), Node([-20.0, 0.0]), Node([0.0, -20.0])]
    )
    cell = NodeCell(Node([10.0, 0.0]))
    tissue = Tissue([cell], membrane)

    constant_force = ConstantForce([0.0, 1.0])
    forces = [
        constant_force,
        ConstantRadialPressure(pressure=1.0, radius=0.5),
        ConstantRadialPressure(pressure=1.0, radius=0.5),
    ]
    apply_forces(tissue, forces)

    expected_force = torch.tensor(
        [2 * 10 * 2 * math.asin(0.025), 1.0], dtype=torch.float64
    )
    torch.testing.assert_close(cell.node.force, expected_force)
    assert constant_force.n_calls == 1

    # the membrane nodes are not moved by these forces
    for node in membrane.nodes:
        torch.testing.assert_close(node.force, torch.zeros(2, dtype=torch.float64))
