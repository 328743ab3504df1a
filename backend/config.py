from dotenv import load_dotenv
import os
from pathlib import Path

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
DEFAULT_BAND = os.environ.get('DEFAULT_BAND', '2m')

# Physical constants
SPEED_OF_LIGHT = 299792458  # m/s
VELOCITY_FACTOR = 0.95  # typical for bare wire elements

# Band definitions
BAND_DEFINITIONS = {
    "17m": {"name": "17m", "center": 18.118, "start": 18.068, "end": 18.168},
    "15m": {"name": "15m", "center": 21.225, "start": 21.0, "end": 21.45},
    "12m": {"name": "12m", "center": 24.94, "start": 24.89, "end": 24.99},
    "11m_cb": {"name": "11m CB", "center": 27.185, "start": 26.965, "end": 27.405},
    "10m": {"name": "10m", "center": 28.5, "start": 28.0, "end": 29.7},
    "6m": {"name": "6m", "center": 51.0, "start": 50.0, "end": 54.0},
    "2m": {"name": "2m", "center": 146.0, "start": 144.0, "end": 148.0},
    "1.25m": {"name": "1.25m", "center": 223.5, "start": 222.0, "end": 225.0},
    "70cm": {"name": "70cm", "center": 435.0, "start": 420.0, "end": 450.0},
}

if DEFAULT_BAND not in BAND_DEFINITIONS:
    DEFAULT_BAND = "2m"

# Antenna type descriptions served by /api/antenna-types
ANTENNA_TYPES = {
    "vertical": {
        "name": "Quarter-Wave Vertical",
        "description": "Single quarter-wave radiator over a ground plane of radials.",
    },
    "dipole": {
        "name": "Half-Wave Dipole",
        "description": "Center-fed half-wave element with two equal legs.",
    },
    "yagi": {
        "name": "3-Element Yagi",
        "description": "Driven element with a longer reflector and a shorter director on a boom.",
    },
    "quad": {
        "name": "Cubical Quad Loop",
        "description": "Full-wave square loop, one quarter of the perimeter per side.",
    },
}
