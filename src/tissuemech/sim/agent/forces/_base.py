from abc import ABC, abstractmethod
from typing import Iterable

from tissuemech.data import Tissue


class Force(ABC):
    """Base class for the force laws applied to a tissue.

    A force reads the node positions of the tissue and adds its
    contribution to the force accumulator of each node it acts on.
    It must not add or remove cells. Forces may keep state between
    calls to apply_tissue_forces.
    """

    @abstractmethod
    def apply_tissue_forces(self, tissue: Tissue) -> None:
        """Compute the forces for this step and add them to the nodes.

        Parameters
        ----------
        tissue : Tissue
            The tissue to apply the forces to.
        """


def apply_forces(tissue: Tissue, forces: Iterable[Force]) -> None:
    """Apply each force to the tissue in turn.

    The forces are applied one after another, so the node
    accumulators only ever have one writer at a time.

    Parameters
    ----------
    tissue : Tissue
        The tissue to apply the forces to.
    forces : Iterable[Force]
        The forces to apply.
    """
    for force in forces:
        force.apply_tissue_forces(tissue)
