""" Shared fixtures for tests """

import logging

import numpy as np
import pytest

from multregt.grid import RegionProperties


@pytest.fixture(autouse = True)
def capture_logs(caplog):
    """Always capture log messages from multregt"""

    caplog.set_level(logging.DEBUG, logger = "multregt")


@pytest.fixture
def region_props():
    """A 3 by 3 by 2 layer grid with MULTNUM varying with I (1 to 3) and FLUXNUM varying with J (10 to 12)"""

    extent_kji = (2, 3, 3)
    k, j, i = np.indices(extent_kji)
    multnum = i + 1
    fluxnum = j + 10
    return RegionProperties(extent_kji, region_arrays = {'MULTNUM': multnum, 'FLUXNUM': fluxnum})


@pytest.fixture
def two_cell_props():
    """A grid of two cells in a row, differing in both MULTNUM (1, 2) and FLUXNUM (5, 6)"""

    return RegionProperties((1, 1, 2),
                            region_arrays = {
                                'MULTNUM': np.array([1, 2], dtype = int),
                                'FLUXNUM': np.array([5, 6], dtype = int)
                            })


@pytest.fixture
def example_deck_text():
    """Text of a small deck with two MULTREGT occurrences and some noise around them"""

    return """RUNSPEC
-- a comment line
GRID

MULTREGT
-- src target mult  dirs nnc  region
   1    2      0.50  X    ALL  M /   first record
   2    3      0.25  'XY' 1*   M /
   -1   3      0.10  Z /
/

EDIT

MULTREGT  -- second occurrence, records spanning lines
   10 11
      2.0 /
   2* 0.5 1* NNC F /
/
"""
