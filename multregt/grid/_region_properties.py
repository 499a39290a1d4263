"""RegionProperties class: named integer region arrays over the cells of a structured grid."""

import logging

log = logging.getLogger(__name__)

import numpy as np


class RegionProperties:
    """Holds integer region categorization arrays (eg. MULTNUM, FLUXNUM, OPERNUM) for one structured grid.

    note:
       cells are identified either by (k, j, i) python indices or by a flattened (global) index in which
       i varies fastest: index = i + ni * (j + nj * k)
    """

    def __init__(self, extent_kji, region_arrays = None, default_region = 'MULTNUM'):
        """Create a RegionProperties object for a grid of the given extent.

        arguments:
           extent_kji (triple of int): the number of cells in the K, J & I axes of the grid
           region_arrays (dict, optional): mapping from categorization name (eg. 'MULTNUM') to an integer
              array of shape extent_kji, or a flat array of nk * nj * ni values in global index order
           default_region (str, default 'MULTNUM'): the categorization used by multiplier records which
              do not name one, when there is no earlier record to inherit from

        returns:
           the new RegionProperties object
        """

        assert len(extent_kji) == 3 and all(n > 0 for n in extent_kji), f'invalid grid extent: {extent_kji}'
        self.extent_kji = tuple(int(n) for n in extent_kji)
        self.default_region = default_region.upper()
        self.arrays = {}  # name -> flat int array in global index order
        self._regions_cache = {}
        if region_arrays is not None:
            for name, a in region_arrays.items():
                self.add_region_array(name, a)

    @property
    def nx(self):
        """Number of cells in the I (X) axis."""
        return self.extent_kji[2]

    @property
    def ny(self):
        """Number of cells in the J (Y) axis."""
        return self.extent_kji[1]

    @property
    def nz(self):
        """Number of cells in the K (Z) axis."""
        return self.extent_kji[0]

    @property
    def cell_count(self):
        """Total number of cells in the grid."""
        return self.nx * self.ny * self.nz

    def add_region_array(self, name, a):
        """Adds (or replaces) a region categorization array, given with shape extent_kji or flattened."""

        a = np.asarray(a)
        assert a.size == self.cell_count, f'region array {name} has {a.size} values for {self.cell_count} cells'
        assert np.issubdtype(a.dtype, np.integer), f'region array {name} is not of integer type'
        key = name.upper()
        self.arrays[key] = a.reshape(-1).astype(int, copy = True)
        self.arrays[key].flags.writeable = False
        self._regions_cache.pop(key, None)

    def names(self):
        """Returns a sorted list of the categorization names for which an array is present."""
        return sorted(self.arrays.keys())

    def has_region(self, name):
        """Returns True if a region array with the given categorization name is present."""
        return name.upper() in self.arrays

    def regions(self, name):
        """Returns a sorted list of the distinct region ids present in the named categorization array."""

        key = name.upper()
        if key not in self._regions_cache:
            ids = [int(r) for r in np.unique(self.arrays[key])]
            if len(ids) == 0:
                log.warning(f'no region ids found in region array {key}')
            self._regions_cache[key] = ids
        return list(self._regions_cache[key])

    def iget(self, name, index):
        """Returns the region id of the cell with the given flattened index, in the named categorization."""
        assert 0 <= index < self.cell_count, f'cell index {index} out of range for grid of {self.cell_count} cells'
        return int(self.arrays[name.upper()][index])

    def region_array(self, name):
        """Returns a read only view of the named region array, with shape extent_kji."""
        return self.arrays[name.upper()].reshape(self.extent_kji)

    def global_index(self, k, j, i):
        """Returns the flattened index for the cell with python indices (k, j, i)."""
        return i + self.nx * (j + self.ny * k)

    def ijk(self, index):
        """Returns (i, j, k) python indices for the cell with the given flattened index."""
        i = index % self.nx
        j = (index // self.nx) % self.ny
        k = index // (self.nx * self.ny)
        return (i, j, k)
