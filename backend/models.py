from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional, Union


class AntennaVariant(str, Enum):
    VERTICAL = "vertical"
    DIPOLE = "dipole"
    YAGI = "yagi"
    QUAD = "quad"


# ── Design Records ──
class Balun(BaseModel):
    model_config = ConfigDict(frozen=True)

    balun_type: str
    ratio: str

CURRENT_BALUN_1_1 = Balun(balun_type="Current Balun", ratio="1:1")
VOLTAGE_BALUN_4_1 = Balun(balun_type="Voltage Balun", ratio="4:1")


class AntennaDesign(BaseModel):
    """Base for the per-variant design records. All lengths are meters."""
    model_config = ConfigDict(frozen=True)

    frequency_mhz: float
    wavelength: float
    gain: str
    balun: Balun

class VerticalDesign(AntennaDesign):
    variant: AntennaVariant = AntennaVariant.VERTICAL
    quarter_wave: float
    ground_plane_length: float
    impedance: str = "36.8 Ω"
    gain: str = "2.15 dBi"
    balun: Balun = CURRENT_BALUN_1_1

class DipoleDesign(AntennaDesign):
    variant: AntennaVariant = AntennaVariant.DIPOLE
    half_wave: float
    each_side: float
    impedance: str = "73 Ω"
    gain: str = "2.15 dBi"
    balun: Balun = CURRENT_BALUN_1_1

class YagiDesign(AntennaDesign):
    variant: AntennaVariant = AntennaVariant.YAGI
    driven_element: float
    reflector: float
    director: float
    boom_length: float
    gain: str = "7-10 dBi"
    balun: Balun = CURRENT_BALUN_1_1

class QuadDesign(AntennaDesign):
    variant: AntennaVariant = AntennaVariant.QUAD
    loop_perimeter: float
    side_length: float
    impedance: str = "100-140 Ω"
    gain: str = "3-4 dBi"
    balun: Balun = VOLTAGE_BALUN_4_1

AnyDesign = Union[VerticalDesign, DipoleDesign, YagiDesign, QuadDesign]


class AntennaDesigns(BaseModel):
    """All four variants computed for one frequency."""
    model_config = ConfigDict(frozen=True)

    frequency_mhz: float
    wavelength: float
    vertical: VerticalDesign
    dipole: DipoleDesign
    yagi: YagiDesign
    quad: QuadDesign

    def get(self, variant: AntennaVariant) -> AnyDesign:
        return getattr(self, AntennaVariant(variant).value)


# ── API Input/Output ──
class CalculateRequest(BaseModel):
    frequency_mhz: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    band: Optional[str] = Field(default=None)
    yagi_elements: int = Field(default=3, ge=2, le=20)

class Estimate(BaseModel):
    impedance_ohms: float
    gain_dbi: float

class VariantResult(BaseModel):
    variant: AntennaVariant
    frequency_mhz: float
    design: AnyDesign
    display: Dict[str, str]
    estimate: Estimate

class CalculateResponse(BaseModel):
    frequency_mhz: float
    wavelength: float
    band: Optional[str] = None
    results: Dict[str, VariantResult]

class EstimateResponse(BaseModel):
    variant: AntennaVariant
    frequency_mhz: float
    elements: int
    impedance_ohms: float
    gain_dbi: float
