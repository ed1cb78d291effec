"""Pytest configuration to expose the packages directory on sys.path."""
from pathlib import Path
import sys

PACKAGES_DIR = Path(__file__).resolve().parents[2]

if str(PACKAGES_DIR) not in sys.path:
    sys.path.insert(0, str(PACKAGES_DIR))
