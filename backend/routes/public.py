"""Public routes: root, bands, antenna types, tutorial."""
from fastapi import APIRouter, HTTPException

from config import BAND_DEFINITIONS, ANTENNA_TYPES
from models import AntennaVariant
from services.physics import compute_design

router = APIRouter()

DEFAULT_TUTORIAL_CONTENT = """# Wire Antenna Calculator

## 1. Enter Your Frequency
Type the operating frequency in MHz, or pick a band preset.

## 2. Choose an Antenna
- **Vertical**: Quarter-wave radiator plus ground radials.
- **Dipole**: Half-wave, cut into two equal legs.
- **Yagi**: Driven element, reflector 5% longer, director 5% shorter.
- **Quad**: Full-wave loop, four equal sides.

## 3. Reading Results
- Lengths already include a 0.95 velocity factor.
- Cut a little long and trim for lowest SWR.

73!"""


@router.get("/")
async def root():
    return {"message": "Antenna Dimension Calculator API"}


@router.get("/bands")
async def get_bands():
    return BAND_DEFINITIONS


@router.get("/bands/{band}")
async def get_band(band: str):
    band_info = BAND_DEFINITIONS.get(band)
    if not band_info:
        raise HTTPException(status_code=404, detail=f"Unknown band: {band}")
    return band_info


@router.get("/antenna-types")
async def get_antenna_types():
    types = {}
    for variant in AntennaVariant:
        # Balun data comes from the design record defaults, any frequency will do
        balun = compute_design(variant, 1.0).balun
        types[variant.value] = {
            **ANTENNA_TYPES[variant.value],
            "balun": balun.balun_type,
            "balun_ratio": balun.ratio,
        }
    return types


@router.get("/tutorial")
async def get_tutorial():
    return {"content": DEFAULT_TUTORIAL_CONTENT}
