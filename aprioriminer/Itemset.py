# ############################# Class Itemset #############################
class Itemset(frozenset):
    """An immutable set of distinct items.

    Items must be hashable and mutually comparable: hashing gives set
    membership and dictionary keys, the ordering gives the canonical sorted
    form used when joining itemsets during candidate generation.
    """

    def sorted_items(self):
        return sorted(self)

    def __repr__(self):
        return "[" + ", ".join(str(item) for item in self.sorted_items()) + "]"

    __str__ = __repr__


class MissingSupportCountError(KeyError):
    """A support count that the bookkeeping should hold is absent."""

    def __init__(self, itemset):
        super().__init__(itemset)
        self.itemset = itemset

    def __str__(self):
        return "No support count recorded for itemset %r." % (self.itemset,)


# ############################# Class SupportCountMap #############################
class SupportCountMap(dict):
    """Maps an itemset to the number of transactions that contain it."""

    def increment(self, itemset):
        self[itemset] = self.get(itemset, 0) + 1

    # counts looked up during rule generation must exist, never default to 0
    def count(self, itemset):
        try:
            return self[itemset]
        except KeyError:
            raise MissingSupportCountError(Itemset(itemset)) from None
