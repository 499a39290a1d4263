"""Expansion of MULTREGT records into flat MultiplierRule objects, one per region pair."""

import logging

log = logging.getLogger(__name__)

from multregt.grid import FaceDir
from ._rule import MultiplierRule
from ._tokens import nnc_behaviour_from_code, region_category_from_code


def _region_set(item, region_props, region):
    # a defaulted or negative region id stands for every region in the categorization
    if item.default_applied() or item.get() < 0:
        return region_props.regions(region.keyword)
    return [item.get()]


def expand_record(record, region_props, region):
    """Returns a list of MultiplierRule objects for the cartesian product of a record's source and target regions.

    arguments:
       record (DeckRecord): one MULTREGT record
       region_props (RegionProperties): the source of the distinct region ids used for wildcard expansion
       region (RegionCategory): the resolved region categorization for this record

    returns:
       list of MultiplierRule, source region varying slowest
    """

    trans_mult = float(record.get_item('TRAN_MULT').get())
    directions = FaceDir.from_multregt_string(record.get_item('DIRECTIONS').get())
    nnc_behaviour = nnc_behaviour_from_code(record.get_item('NNC_MULT').get())

    if region_props.has_region(region.keyword):
        src_regions = _region_set(record.get_item('SRC_REGION'), region_props, region)
        target_regions = _region_set(record.get_item('TARGET_REGION'), region_props, region)
    else:
        # unknown categorization: keep one unexpanded rule, which the index builder rejects
        src_regions = [record.get_item('SRC_REGION').get()]
        target_regions = [record.get_item('TARGET_REGION').get()]

    return [
        MultiplierRule(src, target, trans_mult, directions, nnc_behaviour, region)
        for src in src_regions
        for target in target_regions
    ]


def expand_keyword(keyword, region_props, last_region):
    """Expands all the records of one MULTREGT keyword occurrence.

    arguments:
       keyword (DeckKeyword): one occurrence of the MULTREGT keyword, already validated
       region_props (RegionProperties): the region categorization store
       last_region (RegionCategory): the region categorization of the most recently generated rule, across all
          keyword occurrences expanded so far, or the default categorization if no rule has been generated yet

    returns:
       (list of MultiplierRule, RegionCategory): the rules generated, in record order, and the updated last
       region categorization, to be passed to the expansion of the next occurrence

    note:
       a record with a defaulted REGION_DEF item inherits the categorization of the preceding rule
    """

    rules = []
    for record in keyword:
        region_item = record.get_item('REGION_DEF')
        if region_item.default_applied():
            region = last_region
        else:
            region = region_category_from_code(region_item.get())
        record_rules = expand_record(record, region_props, region)
        if record_rules:
            last_region = region
        rules += record_rules
    log.debug(f'{keyword.name}: {len(keyword)} records expanded to {len(rules)} rules')
    return rules, last_region
