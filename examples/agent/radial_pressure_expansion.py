#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "torch",
#     "matplotlib",
#     "tissuemech",
# ]
# ///
"""Demonstration of a cluster of cells expanding under internal pressure.

This script shows how to use the tissuemech force framework to:
1. Build a tissue of node cells enclosed by a membrane
2. Combine the radial pressure force with a custom force law
3. Move the cells with a forward Euler loop and plot the trajectories
"""

import logging
import math

import matplotlib.pyplot as plt
import torch

from tissuemech.data import Membrane, Node, NodeCell, Tissue
from tissuemech.sim.agent.forces import ConstantRadialPressure, Force, apply_forces


class MembraneConfinement(Force):
    """Push node cells back inside a circular membrane.

    Parameters
    ----------
    membrane_radius : float
        The radius of the membrane.
    stiffness : float
        The spring constant of the confinement.
    """

    def __init__(self, membrane_radius: float, stiffness: float):
        self.membrane_radius = membrane_radius
        self.stiffness = stiffness

    def apply_tissue_forces(self, tissue: Tissue) -> None:
        """Add a restoring force to the node cells outside the membrane.

        Parameters
        ----------
        tissue : Tissue
            The tissue to apply the forces to.
        """
        centre = tissue.membrane.centre()
        for cell in tissue.node_cells():
            node = cell.single_node()
            radial_vector = node.position - centre
            distance = torch.linalg.norm(radial_vector)
            overlap = distance - self.membrane_radius
            if overlap > 0:
                node.add_force_contribution(
                    -self.stiffness * overlap * radial_vector / distance
                )


def make_tissue(n_cells: int, membrane_radius: float) -> Tissue:
    """Make a tissue with a ring of cells inside a circular membrane.

    Parameters
    ----------
    n_cells : int
        The number of node cells.
    membrane_radius : float
        The radius of the membrane.

    Returns
    -------
    Tissue
        The tissue with the cells in a jittered ring of radius 3.
    """
    generator = torch.Generator().manual_seed(42)

    membrane_angles = torch.linspace(0, 2 * math.pi, 65, dtype=torch.float64)[:-1]
    membrane_nodes = [
        Node(membrane_radius * torch.stack([torch.cos(angle), torch.sin(angle)]))
        for angle in membrane_angles
    ]

    cells = []
    for cell_index in range(n_cells):
        angle = 2 * math.pi * cell_index / n_cells
        distance = 3.0 + 0.5 * torch.rand(1, generator=generator).item()
        position = [distance * math.cos(angle), distance * math.sin(angle)]
        cells.append(NodeCell(Node(position, node_id=cell_index)))

    return Tissue(cells, Membrane(membrane_nodes))


def run_simulation(n_time_steps: int = 500, time_step: float = 0.05):
    """Run the demo simulation.

    Returns
    -------
    trajectories : torch.Tensor
        (n_time_steps + 1, n_cells, 2) array of the cell positions.
    """
    membrane_radius = 10.0
    tissue = make_tissue(n_cells=30, membrane_radius=membrane_radius)
    forces = [
        ConstantRadialPressure(pressure=0.2, radius=0.8),
        MembraneConfinement(membrane_radius=membrane_radius, stiffness=1.0),
    ]

    trajectories = [tissue.node_positions()]
    for _ in range(n_time_steps):
        tissue.reset_forces()
        apply_forces(tissue, forces)

        for cell in tissue.node_cells():
            node = cell.single_node()
            node.position = node.position + time_step * node.force
        trajectories.append(tissue.node_positions())

    return torch.stack(trajectories)


def main():
    """Run the demo and plot the cell trajectories."""
    logging.basicConfig(level=logging.INFO)

    print("Running simulation...")
    trajectories = run_simulation()

    final_radii = torch.linalg.norm(trajectories[-1], dim=1)
    print(f"Mean final distance from centre: {final_radii.mean().item():.3f}")

    f, ax = plt.subplots(figsize=(6, 6))
    for cell_index in range(trajectories.shape[1]):
        ax.plot(
            trajectories[:, cell_index, 0].numpy(),
            trajectories[:, cell_index, 1].numpy(),
            c="gray",
            lw=0.5,
        )
    ax.scatter(trajectories[0, :, 0].numpy(), trajectories[0, :, 1].numpy(), s=5)
    ax.scatter(trajectories[-1, :, 0].numpy(), trajectories[-1, :, 1].numpy(), s=5)
    ax.add_patch(plt.Circle((0, 0), 10.0, fill=False, ls="--"))
    ax.set_aspect("equal")
    plt.tight_layout()
    plt.savefig("radial_pressure_expansion.png", dpi=150)
    print("Saved plot to radial_pressure_expansion.png")


if __name__ == "__main__":
    main()
