"""RuleIndex class and the deduplicating builder which folds an ordered rule list into it."""

import logging

log = logging.getLogger(__name__)

from multregt.olio.exceptions import LogicError
from ._tokens import region_category_from_name


class RuleIndex:
    """Read only lookup from (region categorization, ordered region pair) to the multiplier rule in force.

    note:
       the index holds integer positions into its own finalised tuple of rules; it is built once and
       must not be modified afterwards
    """

    def __init__(self, rules, region_props):
        """Builds the index from an ordered list of rules; later rules replace earlier ones for the same key.

        arguments:
           rules (list of MultiplierRule): all rules, in generation order
           region_props (RegionProperties): the region categorization store the rules refer to

        raises:
           LogicError if any rule refers to a region categorization which has no array in region_props
        """

        self.rules = tuple(rules)
        self.region_props = region_props
        self.pairs = {}  # RegionCategory -> {(src, target): position in self.rules}

        for rule in self.rules:
            if not region_props.has_region(rule.region_name):
                raise LogicError(
                    f'multiplier rule references unknown region categorization: {rule.region_name}')

        for position, rule in enumerate(self.rules):
            if rule.src_region == rule.target_region:
                continue
            region_pairs = self.pairs.setdefault(rule.region, {})
            if rule.pair in region_pairs:
                log.debug(f'{rule.region_name} multiplier for regions {rule.pair} replaced by later rule')
            region_pairs[rule.pair] = position

        # categorizations are searched in order of array name
        self.categories = sorted(self.pairs.keys(), key = lambda c: c.keyword)
        for region in self.categories:
            log.info(f'{len(self.pairs[region])} active region multipliers for {region.keyword}')

    @property
    def region_names(self):
        """List of the names of the region arrays which have active rules, in search order."""
        return [region.keyword for region in self.categories]

    def rule(self, region, pair):
        """Returns the rule in force for the ordered region pair in a categorization (given by enum or name), or None."""

        position = self.pairs.get(region_category_from_name(region), {}).get(pair)
        if position is None:
            return None
        return self.rules[position]

    def active_rules(self):
        """Returns a list of the rules in force, ordered by region categorization name then region pair."""

        return [self.rules[self.pairs[c][pair]] for c in self.categories for pair in sorted(self.pairs[c])]

    def __len__(self):
        return sum(len(p) for p in self.pairs.values())
