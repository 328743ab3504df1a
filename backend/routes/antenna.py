"""Antenna dimension calculation, estimate, and cut-sheet routes."""
import logging
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from config import BAND_DEFINITIONS, DEFAULT_BAND
from models import (
    AntennaVariant, AntennaDesigns, CalculateRequest, CalculateResponse,
    Estimate, EstimateResponse, VariantResult,
)
from services.physics import calculate_all, estimate_impedance, estimate_gain
from services.display import render_design
from services.pdf_service import generate_cut_sheet_pdf

router = APIRouter()
logger = logging.getLogger(__name__)


def _resolve_request(request: CalculateRequest):
    """Explicit frequency wins; otherwise use the band center."""
    band = request.band if request.band in BAND_DEFINITIONS else None
    if request.band and band is None:
        logger.info(f"Unknown band '{request.band}', falling back to {DEFAULT_BAND}")
    if request.frequency_mhz:
        return request.frequency_mhz, band
    band = band or DEFAULT_BAND
    return BAND_DEFINITIONS[band]["center"], band


def _calculate_or_422(frequency) -> AntennaDesigns:
    designs = calculate_all(frequency)
    if designs is None:
        raise HTTPException(status_code=422, detail="Frequency must be a positive number of MHz")
    return designs


def _variant_result(designs: AntennaDesigns, variant: AntennaVariant, yagi_elements: int) -> VariantResult:
    design = designs.get(variant)
    elements = yagi_elements if variant == AntennaVariant.YAGI else 1
    return VariantResult(
        variant=variant, frequency_mhz=designs.frequency_mhz,
        design=design, display=render_design(design),
        estimate=Estimate(
            impedance_ohms=estimate_impedance(variant, designs.frequency_mhz),
            gain_dbi=estimate_gain(variant, designs.frequency_mhz, elements),
        ),
    )


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(request: CalculateRequest):
    frequency, band = _resolve_request(request)
    designs = _calculate_or_422(frequency)
    return CalculateResponse(
        frequency_mhz=designs.frequency_mhz, wavelength=designs.wavelength, band=band,
        results={v.value: _variant_result(designs, v, request.yagi_elements) for v in AntennaVariant},
    )


@router.post("/calculate/{variant}", response_model=VariantResult)
async def calculate_variant(variant: AntennaVariant, request: CalculateRequest):
    frequency, _ = _resolve_request(request)
    designs = _calculate_or_422(frequency)
    return _variant_result(designs, variant, request.yagi_elements)


@router.get("/estimate/{variant}", response_model=EstimateResponse)
async def estimate(variant: AntennaVariant,
                   frequency_mhz: float = Query(..., gt=0, allow_inf_nan=False),
                   elements: int = Query(3, ge=2, le=20)):
    return EstimateResponse(
        variant=variant, frequency_mhz=frequency_mhz, elements=elements,
        impedance_ohms=estimate_impedance(variant, frequency_mhz),
        gain_dbi=estimate_gain(variant, frequency_mhz, elements),
    )


@router.post("/spec-sheet/pdf")
async def generate_pdf(request: CalculateRequest):
    """Generate a PDF cut sheet for every antenna type at the requested frequency."""
    frequency, band = _resolve_request(request)
    designs = _calculate_or_422(frequency)
    band_name = BAND_DEFINITIONS[band]["name"] if band else ""
    pdf_bytes = generate_cut_sheet_pdf(designs, band_name, request.yagi_elements)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=antenna_cut_sheet.pdf"},
    )
