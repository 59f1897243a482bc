import numpy as np

from aprioriminer.Itemset import Itemset


# ############################# Class AssociationRule #############################
class AssociationRule:
    """An implication antecedent -> consequent with its confidence.

    Two rules are equal when their antecedents and consequents are equal,
    whatever their confidence.
    """

    __slots__ = ('_antecedent', '_consequent', '_confidence')

    def __init__(self, antecedent, consequent, confidence=np.nan):
        if antecedent is None:
            raise ValueError("The rule antecedent is None.")
        if consequent is None:
            raise ValueError("The rule consequent is None.")

        self._antecedent = Itemset(antecedent)
        self._consequent = Itemset(consequent)

        if self._antecedent & self._consequent:
            raise ValueError("The rule antecedent and consequent overlap: %r -> %r"
                             % (self._antecedent, self._consequent))

        self._confidence = float(confidence)

    @property
    def antecedent(self):
        return self._antecedent

    @property
    def consequent(self):
        return self._consequent

    @property
    def confidence(self):
        return self._confidence

    @property
    def itemset(self):
        return Itemset(self._antecedent | self._consequent)

    def __eq__(self, other):
        if not isinstance(other, AssociationRule):
            return NotImplemented
        return self._antecedent == other._antecedent and self._consequent == other._consequent

    def __hash__(self):
        return hash((self._antecedent, self._consequent))

    def __repr__(self):
        return "%r -> %r: %s" % (self._antecedent, self._consequent, self._confidence)

    # descending confidence, then canonical antecedent and consequent order
    def sort_key(self):
        return -self._confidence, self._antecedent.sorted_items(), self._consequent.sorted_items()
