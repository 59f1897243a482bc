import logging

from aprioriminer.FrequentItemsetData import FrequentItemsetData
from aprioriminer.Itemset import Itemset, SupportCountMap
from aprioriminer.Utils import check_threshold, count_to_support

logger = logging.getLogger(__name__)


def mine(transactions, minimum_support):
    """Find every frequent itemset in ``transactions`` with the level-wise Apriori loop.

    :param
    @transactions - sequence of transactions, each an iterable of comparable, hashable items
    @minimum_support - fraction of transactions an itemset must occur in, within [0, 1]

    Returns a FrequentItemsetData, or None when there are no transactions.
    """
    if transactions is None:
        raise ValueError("The transaction list is None.")
    minimum_support = check_threshold(minimum_support, "minimum support")

    # duplicate items within a transaction collapse here
    transactions = [Itemset(transaction) for transaction in transactions]
    if not transactions:
        logger.info("No transactions to mine.")
        return None

    no_of_transactions = len(transactions)

    # every count computed along the way is kept, frequent or not
    support_count_map = SupportCountMap()

    # maps each k to the list of frequent k-itemsets
    levels = {1: find_frequent_items(transactions, support_count_map, minimum_support)}
    logger.debug("level 1: %d frequent itemsets", len(levels[1]))

    k = 1
    while levels[k]:
        k += 1

        candidates = generate_candidates(levels[k - 1])

        for transaction in transactions:
            for candidate in subset(candidates, transaction):
                support_count_map.increment(candidate)

        levels[k] = get_next_itemsets(candidates, support_count_map, minimum_support, no_of_transactions)
        logger.debug("level %d: %d candidates, %d frequent itemsets", k, len(candidates), len(levels[k]))

    return FrequentItemsetData(extract_frequent_itemsets(levels),
                               support_count_map,
                               minimum_support,
                               no_of_transactions)


# ################## level 1 ###################
def find_frequent_items(transactions, support_count_map, minimum_support):
    all_items = set()
    for transaction in transactions:
        for item in transaction:
            support_count_map.increment(Itemset((item,)))
            all_items.add(item)

    no_of_transactions = len(transactions)

    frequent_items = []
    for item in sorted(all_items):
        itemset = Itemset((item,))
        if count_to_support(support_count_map[itemset], no_of_transactions) >= minimum_support:
            frequent_items.append(itemset)

    return frequent_items


# ################## candidate generation ###################
def generate_candidates(itemset_list):
    """Join every pair of (k-1)-itemsets sharing their first k-2 sorted items.

    Only the two joined parents are known to be frequent; the other
    (k-1)-subsets of a candidate are not checked, the support filter
    removes whatever is not frequent.
    """
    sorted_list = sorted(itemset.sorted_items() for itemset in itemset_list)

    candidates = []
    for i in range(len(sorted_list)):
        for j in range(i + 1, len(sorted_list)):
            candidate = try_merge_itemsets(sorted_list[i], sorted_list[j])
            if candidate is not None:
                candidates.append(candidate)

    return candidates


def try_merge_itemsets(itemset1, itemset2):
    length = len(itemset1)

    if itemset1[:length - 1] != itemset2[:length - 1]:
        return None

    if itemset1[length - 1] == itemset2[length - 1]:
        return None

    return Itemset(itemset1[:length - 1] + [itemset1[length - 1], itemset2[length - 1]])


# ################## support counting ###################
# the candidates that are contained in transaction
def subset(candidates, transaction):
    return [candidate for candidate in candidates if candidate <= transaction]


def get_next_itemsets(candidates, support_count_map, minimum_support, no_of_transactions):
    next_itemsets = []

    for itemset in candidates:
        # candidates never seen in a transaction have no count at all
        if itemset in support_count_map:
            support = count_to_support(support_count_map[itemset], no_of_transactions)

            if support >= minimum_support:
                next_itemsets.append(itemset)

    return next_itemsets


def extract_frequent_itemsets(levels):
    frequent_itemsets = []
    for k in sorted(levels):
        frequent_itemsets.extend(levels[k])
    return frequent_itemsets
