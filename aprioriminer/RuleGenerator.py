import logging

from aprioriminer.AssociationRule import AssociationRule
from aprioriminer.Itemset import Itemset
from aprioriminer.Utils import check_threshold

logger = logging.getLogger(__name__)


def mine_association_rules(data, minimum_confidence):
    """Derive the association rules of every frequent itemset in ``data``.

    Returns a list of AssociationRule sorted on descending confidence, ties
    ordered on the sorted antecedent and then the sorted consequent.
    """
    if data is None:
        raise ValueError("The frequent itemset data is None.")
    minimum_confidence = check_threshold(minimum_confidence, "minimum confidence")

    result_set = set()

    for itemset in data.frequent_itemset_list:
        # a rule needs at least one item on each side
        if len(itemset) < 2:
            continue

        basic_rule_set = generate_all_basic_association_rules(itemset, data)

        for rule in basic_rule_set:
            if rule.confidence >= minimum_confidence:
                result_set.add(rule)

        generate_association_rules(itemset, basic_rule_set, data, minimum_confidence, result_set)

    logger.debug("%d association rules at minimum confidence %s", len(result_set), minimum_confidence)

    return sorted(result_set, key=AssociationRule.sort_key)


# ################## lattice traversal ###################
def generate_association_rules(itemset, rule_set, data, minimum_confidence, collector):
    """Grow consequents one item at a time, level by level.

    Rules below ``minimum_confidence`` are dropped and never expanded further:
    shrinking an antecedent can only raise its support, so confidence only falls.
    """
    k = len(itemset)

    while rule_set:
        # every rule of a level has the same consequent size
        m = len(next(iter(rule_set)).consequent)

        # the antecedent must keep at least one item
        if k <= m + 1:
            break

        next_rules = move_one_item_to_consequents(itemset, rule_set, data)

        rule_set = set(rule for rule in next_rules if rule.confidence >= minimum_confidence)
        collector.update(rule_set)


def move_one_item_to_consequents(itemset, rule_set, data):
    output = set()
    itemset_support_count = data.get_support_count(itemset)

    for rule in rule_set:
        for item in rule.antecedent:
            antecedent = Itemset(rule.antecedent - {item})
            consequent = Itemset(rule.consequent | {item})

            antecedent_support_count = data.get_support_count(antecedent)
            output.add(AssociationRule(antecedent,
                                       consequent,
                                       itemset_support_count / antecedent_support_count))

    return output


def generate_all_basic_association_rules(itemset, data):
    """One rule per item, with that item alone as the consequent."""
    basic_rule_set = set()
    itemset_support_count = data.get_support_count(itemset)

    for item in itemset:
        antecedent = Itemset(itemset - {item})
        consequent = Itemset((item,))

        antecedent_support_count = data.get_support_count(antecedent)
        basic_rule_set.add(AssociationRule(antecedent,
                                           consequent,
                                           itemset_support_count / antecedent_support_count))

    return basic_rule_set
