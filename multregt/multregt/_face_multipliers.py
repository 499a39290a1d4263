"""Grid wide arrays of region multipliers for the internal faces of a structured grid."""

import logging

log = logging.getLogger(__name__)

import numpy as np

from multregt.grid import FaceDir


def _axis_multipliers(index, axis):
    # returns multipliers for the faces between neighbouring cells in one axis (0 = K, 1 = J, 2 = I),
    # with the same precedence as lookup(): categorization order, then direct pair before reversed pair
    region_props = index.region_props
    face = FaceDir.plus_for_axis('KJI'[axis])
    short_neighbour = axis != 0  # K neighbours share i and j
    n = region_props.extent_kji[axis]
    inner_shape = list(region_props.extent_kji)
    inner_shape[axis] = n - 1
    mult = np.ones(inner_shape, dtype = float)
    pending = np.ones(inner_shape, dtype = bool)

    for region in index.categories:
        a = region_props.region_array(region.keyword)
        minus = np.take(a, range(n - 1), axis = axis)
        plus = np.take(a, range(1, n), axis = axis)
        rules = [index.rules[position] for position in index.pairs[region].values()]
        rules = [rule for rule in rules if rule.applies_to_face(face)]
        matched = np.zeros(inner_shape, dtype = bool)
        applies = np.zeros(inner_shape, dtype = bool)
        category_mult = np.ones(inner_shape, dtype = float)
        for reverse in (False, True):
            for rule in rules:
                src, target = (rule.target_region, rule.src_region) if reverse else rule.pair
                mask = pending & ~matched & (minus == src) & (plus == target)
                if not np.any(mask):
                    continue
                matched |= mask
                if rule.applies_to_connection(short_neighbour):
                    applies |= mask
                    category_mult[mask] = rule.trans_mult
        mult[applies] = category_mult[applies]
        pending &= ~applies

    return mult


def face_multipliers(scanner):
    """Returns region multipliers for all the K, J & I faces of the grid, as seen from the minus side cell.

    arguments:
       scanner (MultRegtScanner): the scanner holding the rules and the region arrays

    returns:
       3 numpy float arrays of shape (nk, nj, ni + 1), (nk, nj + 1, ni), (nk + 1, nj, ni) being the
       multipliers for the I, J & K faces respectively

    notes:
       outer faces always have a multiplier of 1.0; the multiplier for the face between a cell and its plus
       neighbour in an axis is the value that scanner.region_multiplier() returns for the pair with the plus
       face direction of that axis (XPlus, YPlus or ZPlus); values are computed with array masks, one pass
       per active rule
    """

    region_props = scanner.region_props
    nk, nj, ni = region_props.extent_kji
    i_mult = np.ones((nk, nj, ni + 1), dtype = float)
    j_mult = np.ones((nk, nj + 1, ni), dtype = float)
    k_mult = np.ones((nk + 1, nj, ni), dtype = float)

    if len(scanner.index) == 0:
        return i_mult, j_mult, k_mult

    k_mult[1:-1] = _axis_multipliers(scanner.index, 0)
    j_mult[:, 1:-1] = _axis_multipliers(scanner.index, 1)
    i_mult[:, :, 1:-1] = _axis_multipliers(scanner.index, 2)

    log.debug(f'region multipliers differ from one at {np.count_nonzero(i_mult != 1.0)} I faces, '
              f'{np.count_nonzero(j_mult != 1.0)} J faces and {np.count_nonzero(k_mult != 1.0)} K faces')
    return i_mult, j_mult, k_mult
