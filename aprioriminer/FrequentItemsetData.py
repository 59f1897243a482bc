from types import MappingProxyType

from aprioriminer.Itemset import SupportCountMap
from aprioriminer.Utils import count_to_support


class FrequentItemsetData:
    """Read-only result of one mining run.

    :param
    @frequent_itemset_list - all frequent itemsets, level 1 first
    @support_count_map - SupportCountMap holding every count computed while mining
    @minimum_support - the support threshold the itemsets were mined with
    @no_of_transactions - number of transactions that were mined
    """
    def __init__(self,
                 frequent_itemset_list,
                 support_count_map,
                 minimum_support,
                 no_of_transactions):
        self._frequent_itemset_list = tuple(frequent_itemset_list)
        self._support_count_map = SupportCountMap(support_count_map)
        self._minimum_support = minimum_support
        self._no_of_transactions = no_of_transactions

    @property
    def frequent_itemset_list(self):
        return self._frequent_itemset_list

    @property
    def support_count_map(self):
        return MappingProxyType(self._support_count_map)

    @property
    def minimum_support(self):
        return self._minimum_support

    @property
    def no_of_transactions(self):
        return self._no_of_transactions

    def get_support_count(self, itemset):
        return self._support_count_map.count(itemset)

    def get_support(self, itemset):
        return count_to_support(self.get_support_count(itemset), self._no_of_transactions)

    def __len__(self):
        return len(self._frequent_itemset_list)

    def __repr__(self):
        return "FrequentItemsetData(itemsets=%d, minimum_support=%s, transactions=%d)" % (
            len(self._frequent_itemset_list), self._minimum_support, self._no_of_transactions)
