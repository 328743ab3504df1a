"""Display adapter: rendered label/value fields and the active antenna selection."""
import logging
from typing import Dict, Optional, Union

from models import (
    AntennaVariant, AntennaDesigns, AnyDesign,
    VerticalDesign, DipoleDesign, YagiDesign, QuadDesign,
)
from services.physics import calculate_all, format_length

logger = logging.getLogger(__name__)

# Length fields per design type, in display order
LENGTH_LABELS = {
    VerticalDesign: [("Height", "quarter_wave"), ("Ground Radials", "ground_plane_length")],
    DipoleDesign: [("Total Length", "half_wave"), ("Each Side", "each_side")],
    YagiDesign: [
        ("Driven Element", "driven_element"), ("Reflector", "reflector"),
        ("Director", "director"), ("Boom Length", "boom_length"),
    ],
    QuadDesign: [("Loop Perimeter", "loop_perimeter"), ("Side Length", "side_length")],
}


def render_design(design: AnyDesign) -> Dict[str, str]:
    fields = {}
    for label, attr in LENGTH_LABELS[type(design)]:
        fields[label] = format_length(getattr(design, attr))
    impedance = getattr(design, "impedance", None)
    if impedance is not None:
        fields["Impedance"] = impedance
    fields["Gain"] = design.gain
    fields["Balun"] = design.balun.balun_type
    fields["Balun Ratio"] = design.balun.ratio
    return fields


class DesignDisplay:
    """Holds what is currently shown: the selected variant and the last good results.

    An invalid frequency leaves the previous results in place.
    """

    def __init__(self, variant: Union[AntennaVariant, str] = AntennaVariant.VERTICAL):
        self.active = AntennaVariant(variant)
        self.frequency_mhz: Optional[float] = None
        self.designs: Optional[AntennaDesigns] = None
        self.fields: Dict[AntennaVariant, Dict[str, str]] = {}

    def update(self, frequency) -> bool:
        designs = calculate_all(frequency)
        if designs is None:
            return False
        self.designs = designs
        self.frequency_mhz = designs.frequency_mhz
        self.fields = {v: render_design(designs.get(v)) for v in AntennaVariant}
        return True

    def select(self, variant: Union[AntennaVariant, str]) -> None:
        self.active = AntennaVariant(variant)
        logger.debug(f"Active antenna type: {self.active.value}")
        if self.frequency_mhz is not None:
            self.update(self.frequency_mhz)

    def active_fields(self) -> Dict[str, str]:
        return dict(self.fields.get(self.active, {}))
