"""Script to validate the constant radial pressure force.

A ring of node cells is placed around the centre of a fixed membrane.
While the cells cover the whole circle, the total magnitude of the
pressure force should equal pressure * 2 * pi * ring radius. As the
ring expands, gaps open between the cells and the total force drops
below this value.
"""

import math

import numpy as np
import torch
from matplotlib import pyplot as plt

from tissuemech.data import Membrane, Node, NodeCell, Tissue
from tissuemech.sim.agent.forces import ConstantRadialPressure, apply_forces


def make_ring(n_nodes: int, distance: float) -> list[Node]:
    """Make nodes equally spaced on a circle around the origin.

    Parameters
    ----------
    n_nodes : int
        The number of nodes in the ring.
    distance : float
        The distance of each node from the origin.

    Returns
    -------
    nodes : list[Node]
        The nodes of the ring.
    """
    angles = torch.linspace(0, 2 * math.pi, n_nodes + 1, dtype=torch.float64)[:-1]
    positions = distance * torch.stack([torch.cos(angles), torch.sin(angles)], dim=1)
    return [Node(position, node_id=index) for index, position in enumerate(positions)]


if __name__ == "__main__":
    # simulation parameters
    time_step = 0.05
    damping_coefficient = 1.0
    n_time_steps = 400

    # run parameters
    plot_path = "radial_pressure.png"

    # force parameters
    pressure = 0.1
    cell_radius = 0.9

    # initialize the tissue
    membrane = Membrane(make_ring(n_nodes=32, distance=20.0))
    cells = [NodeCell(node) for node in make_ring(n_nodes=24, distance=3.0)]
    tissue = Tissue(cells, membrane)
    forces = [ConstantRadialPressure(pressure=pressure, radius=cell_radius)]

    # run the simulation
    logged_times = []
    logged_radii = []
    logged_total_force = []
    for time_step_index in range(n_time_steps):
        tissue.reset_forces()
        apply_forces(tissue, forces)

        node_forces = tissue.node_forces()
        ring_radius = torch.linalg.norm(tissue.node_positions(), dim=1).mean()

        # log data
        logged_times.append(time_step_index * time_step)
        logged_radii.append(ring_radius.item())
        logged_total_force.append(torch.linalg.norm(node_forces, dim=1).sum().item())

        for cell in tissue.node_cells():
            node = cell.single_node()
            node.position = node.position + node.force * (
                time_step / damping_coefficient
            )

    # get the results as numpy arrays
    logged_times = np.asarray(logged_times)
    logged_radii = np.asarray(logged_radii)
    logged_total_force = np.asarray(logged_total_force)
    expected_total_force = pressure * 2 * np.pi * logged_radii

    print(f"final ring radius: {logged_radii[-1]}")
    print(f"initial total force: {logged_total_force[0]}")
    print(f"initial expected total force: {expected_total_force[0]}")

    # plot
    f, axs = plt.subplots(1, 2, figsize=(10, 5))
    axs[0].plot(logged_times, logged_radii)
    axs[0].set_xlabel("time")
    axs[0].set_ylabel("ring radius")

    axs[1].plot(logged_times, expected_total_force, c="gray", label="full circle")
    axs[1].scatter(logged_times, logged_total_force, s=0.5, label="computed")
    axs[1].set_xlabel("time")
    axs[1].set_ylabel("total force magnitude")
    axs[1].legend()

    plt.tight_layout()
    f.savefig(plot_path, dpi=300)
