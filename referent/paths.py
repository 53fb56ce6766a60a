"""Centralised path constants for the application."""

from pathlib import Path

# Project root is 2 levels up from this file (referent/paths.py -> project root)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
