import logging
import math
from enum import Enum, auto

import torch

from tissuemech.data import Membrane, Node, Tissue
from tissuemech.errors import GeometryDegenerateError
from tissuemech.sim.agent.forces._base import Force
from tissuemech.sim.agent.utils.angles import AngleInterval, wrap_angle

logger = logging.getLogger(__name__)


class PressureState(Enum):
    """Whether a radial pressure force is still being computed."""

    ACTIVE = auto()
    DISABLED = auto()


class ConstantRadialPressure(Force):
    """An internal pressure pushing node cells radially from the tissue centre.

    Each node cell is assumed to be a disc of the given radius. Seen from
    the centre of the membrane, the cell covers an arc of the surrounding
    circle. Starting from the cell closest to the centre, each cell is
    credited with the part of its arc that no closer cell has already
    covered, and receives a radial force proportional to that arc length.
    Once the whole circle is covered the remaining cells are shadowed and
    receive no force.

    When a cell comes within one diameter of the centre the arc
    approximation no longer holds. The force then disables itself
    permanently and applies nothing for the rest of the simulation.

    Parameters
    ----------
    pressure : float
        The force per unit arc length. Positive values push away from
        the centre, negative values pull towards it.
    radius : float
        The radius of a node cell. Must be positive.
    membrane : Membrane | None
        The membrane used to compute the centre. If None, the membrane
        of the tissue passed to apply_tissue_forces is used.
        Default value is None.
    """

    def __init__(
        self,
        pressure: float,
        radius: float,
        membrane: Membrane | None = None,
    ):
        if not math.isfinite(pressure):
            raise ValueError(f"pressure must be finite, got {pressure}")
        if not (math.isfinite(radius) and radius > 0):
            raise ValueError(f"radius must be positive and finite, got {radius}")

        self.pressure = float(pressure)
        self.radius = float(radius)
        self.membrane = membrane
        self._state = PressureState.ACTIVE

    @property
    def state(self) -> PressureState:
        """Get the state of the force."""
        return self._state

    @property
    def too_close(self) -> bool:
        """True once a cell has come too close to the centre."""
        return self._state is PressureState.DISABLED

    def apply_tissue_forces(self, tissue: Tissue) -> None:
        """Add the pressure force to each node cell in the tissue.

        Parameters
        ----------
        tissue : Tissue
            The tissue to apply the forces to.

        Raises
        ------
        GeometryDegenerateError
            If an angle or force is not a finite real value.
            No forces are applied in this case.
        """
        if self._state is PressureState.DISABLED:
            return

        membrane = self.membrane if self.membrane is not None else tissue.membrane
        centre = membrane.centre()

        # distance of each node cell from the centre
        entries: list[tuple[Node, torch.Tensor, torch.Tensor]] = []
        minimum_distance = 2 * self.radius
        for cell in tissue.cells():
            node = cell.single_node()
            if node is None:
                continue

            radial_vector = node.position - centre
            distance = torch.linalg.norm(radial_vector)
            if distance < minimum_distance:
                self._state = PressureState.DISABLED
                logger.info(
                    "Radial pressure turned off: node %s is %g from the centre "
                    "(minimum %g)",
                    node.node_id,
                    distance.item(),
                    minimum_distance,
                )
                return
            entries.append((node, radial_vector, distance))

        # closest first. sort is stable so ties keep the cell order
        entries.sort(key=lambda entry: entry[2].item())

        covered_angles = AngleInterval()
        node_forces: list[tuple[Node, torch.Tensor]] = []
        for node, radial_vector, distance in entries:
            if covered_angles.is_circle_complete():
                break

            theta = torch.atan2(radial_vector[1], radial_vector[0])
            half_width = torch.asin(self.radius / (2 * distance))
            if not (torch.isfinite(theta) and torch.isfinite(half_width)):
                raise GeometryDegenerateError(
                    f"Angle of node {node.node_id} is not real: "
                    f"theta={theta.item()}, half width={half_width.item()}"
                )

            lower_angle = wrap_angle((theta - half_width).item())
            upper_angle = wrap_angle((theta + half_width).item())
            angle_covered = covered_angles.get_unvisited_angle(
                (lower_angle, upper_angle)
            )

            arc_length = distance * angle_covered
            force = self.pressure * arc_length * radial_vector / distance
            if not torch.isfinite(force).all():
                raise GeometryDegenerateError(
                    f"Force on node {node.node_id} is not real: {force.tolist()}"
                )
            node_forces.append((node, force))

        for node, force in node_forces:
            node.add_force_contribution(force)

        logger.debug(
            "Applied radial pressure to %d of %d node cells, %g rad covered",
            len(node_forces),
            len(entries),
            covered_angles.claimed_angle,
        )
