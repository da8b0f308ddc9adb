"""Configuration module for the carbon footprint survey project.

Centralizes project-wide settings shared by the engine and example scripts.
"""
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Reference footprint used on the results view (kg CO2e per day, India average)
NATIONAL_AVERAGE_KG_PER_DAY = 8.5

# Accepted floating-point residue when checking that a distribution sums to 100
SUM_TOLERANCE = 1e-6

# Default settings
DEFAULT_LOG_LEVEL = "INFO"
