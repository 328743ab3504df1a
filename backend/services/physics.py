"""Core antenna physics engine — wavelength-derived element dimensions."""
import logging
import math
from typing import Optional, Union

from config import SPEED_OF_LIGHT, VELOCITY_FACTOR
from models import (
    AntennaVariant, AntennaDesigns, AnyDesign,
    VerticalDesign, DipoleDesign, YagiDesign, QuadDesign,
)

logger = logging.getLogger(__name__)

# Element tuning ratios relative to the driven element
REFLECTOR_RATIO = 1.05  # tuned below resonance
DIRECTOR_RATIO = 0.95  # tuned above resonance
BOOM_WAVELENGTHS = 0.2
GROUND_PLANE_RATIO = 0.95

NOMINAL_IMPEDANCE_OHMS = {
    AntennaVariant.VERTICAL: 36.8,
    AntennaVariant.DIPOLE: 73.0,
    AntennaVariant.YAGI: 50.0,
    AntennaVariant.QUAD: 120.0,
}
DEFAULT_IMPEDANCE_OHMS = 50.0

NOMINAL_GAIN_DBI = {
    AntennaVariant.VERTICAL: 2.15,
    AntennaVariant.DIPOLE: 2.15,
    AntennaVariant.QUAD: 3.5,
}
YAGI_BASE_GAIN_DBI = 7.0
YAGI_BASE_ELEMENTS = 3
YAGI_GAIN_PER_ELEMENT_DB = 1.5


# ── Input Helpers ──

def parse_frequency(value) -> Optional[float]:
    """Frequency in MHz as a float, or None when it cannot be used."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        frequency = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(frequency) or frequency <= 0:
        return None
    # Subnormal frequencies overflow the wavelength
    if not math.isfinite(wavelength_m(frequency)):
        return None
    return frequency

def _as_variant(variant: Union[AntennaVariant, str]) -> Optional[AntennaVariant]:
    try:
        return AntennaVariant(variant)
    except ValueError:
        return None


# ── Variant Formulas ──

def wavelength_m(frequency_mhz: float) -> float:
    return SPEED_OF_LIGHT / (frequency_mhz * 1e6)

def compute_vertical(frequency_mhz: float) -> VerticalDesign:
    wavelength = wavelength_m(frequency_mhz)
    quarter_wave = (wavelength / 4) * VELOCITY_FACTOR
    return VerticalDesign(
        frequency_mhz=frequency_mhz, wavelength=wavelength,
        quarter_wave=quarter_wave,
        ground_plane_length=quarter_wave * GROUND_PLANE_RATIO,
    )

def compute_dipole(frequency_mhz: float) -> DipoleDesign:
    wavelength = wavelength_m(frequency_mhz)
    half_wave = (wavelength / 2) * VELOCITY_FACTOR
    return DipoleDesign(
        frequency_mhz=frequency_mhz, wavelength=wavelength,
        half_wave=half_wave, each_side=half_wave / 2,
    )

def compute_yagi(frequency_mhz: float) -> YagiDesign:
    wavelength = wavelength_m(frequency_mhz)
    driven = wavelength * VELOCITY_FACTOR
    return YagiDesign(
        frequency_mhz=frequency_mhz, wavelength=wavelength,
        driven_element=driven,
        reflector=driven * REFLECTOR_RATIO,
        director=driven * DIRECTOR_RATIO,
        boom_length=wavelength * BOOM_WAVELENGTHS,
    )

def compute_quad(frequency_mhz: float) -> QuadDesign:
    wavelength = wavelength_m(frequency_mhz)
    perimeter = wavelength * VELOCITY_FACTOR
    return QuadDesign(
        frequency_mhz=frequency_mhz, wavelength=wavelength,
        loop_perimeter=perimeter, side_length=perimeter / 4,
    )


COMPUTE_BY_VARIANT = {
    AntennaVariant.VERTICAL: compute_vertical,
    AntennaVariant.DIPOLE: compute_dipole,
    AntennaVariant.YAGI: compute_yagi,
    AntennaVariant.QUAD: compute_quad,
}


def compute_design(variant: Union[AntennaVariant, str], frequency_mhz: float) -> AnyDesign:
    """Route a variant identifier to its formula. Raises ValueError for unknown variants."""
    return COMPUTE_BY_VARIANT[AntennaVariant(variant)](frequency_mhz)


def calculate_all(frequency) -> Optional[AntennaDesigns]:
    """Recalculate every variant for a raw frequency value.

    Returns None for a non-numeric, non-finite or non-positive frequency so the
    caller can keep whatever it displayed last.
    """
    frequency_mhz = parse_frequency(frequency)
    if frequency_mhz is None:
        logger.debug(f"Skipping calculation for invalid frequency: {frequency!r}")
        return None

    logger.debug(f"Calculating for frequency: {frequency_mhz} MHz")
    designs = AntennaDesigns(
        frequency_mhz=frequency_mhz,
        wavelength=wavelength_m(frequency_mhz),
        vertical=compute_vertical(frequency_mhz),
        dipole=compute_dipole(frequency_mhz),
        yagi=compute_yagi(frequency_mhz),
        quad=compute_quad(frequency_mhz),
    )
    logger.debug("All calculations completed")
    return designs


# ── Formatting ──

def format_length(meters: float) -> str:
    if meters >= 1:
        return f"{meters:.2f} m"
    elif meters >= 0.01:
        return f"{meters * 100:.1f} cm"
    return f"{meters * 1000:.0f} mm"


# ── Estimates ──

def estimate_impedance(variant: Union[AntennaVariant, str], frequency_mhz: float) -> float:
    """Nominal feedpoint impedance in ohms.

    The frequency is accepted for interface symmetry but does not enter the
    value: each variant has a single textbook figure.
    """
    return NOMINAL_IMPEDANCE_OHMS.get(_as_variant(variant), DEFAULT_IMPEDANCE_OHMS)


def estimate_gain(variant: Union[AntennaVariant, str], frequency_mhz: float,
                  element_count: int = 1) -> float:
    """Gain in dBi. Only the Yagi depends on element_count: each element beyond
    a 3-element baseline adds 1.5 dB to the 7 dBi baseline."""
    kind = _as_variant(variant)
    if kind == AntennaVariant.YAGI:
        return YAGI_BASE_GAIN_DBI + (element_count - YAGI_BASE_ELEMENTS) * YAGI_GAIN_PER_ELEMENT_DB
    return NOMINAL_GAIN_DBI.get(kind, 0.0)
