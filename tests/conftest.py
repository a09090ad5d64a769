"""Shared fixtures for Pairing Method tests."""

import sys
from pathlib import Path

import pytest

# Allow running pytest from a plain checkout (see run_tests.py)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def neutral_food():
    """Dish that triggers nothing beyond intensity harmony."""
    return {
        'name': 'Plain Dish',
        'protein_intensity': 3, 'fat_level': 0, 'acidity': 0,
        'sweetness': 0, 'spice_heat': 0, 'umami': 0
    }


@pytest.fixture
def neutral_wine():
    """Wine matching neutral_food's intensity with no other interactions."""
    return {
        'name': 'Plain Wine',
        'body': 3, 'tannin': 0, 'acidity': 2, 'alcohol': 3, 'sweetness': 0
    }


@pytest.fixture
def sample_foods_path():
    return DATA_DIR / "foods.json"


@pytest.fixture
def sample_wines_path():
    return DATA_DIR / "wines.json"
