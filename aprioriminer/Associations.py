import os

import numpy as np
import pandas as pd


class Associations:
    """What a call to Apriori.fit() produces.

    ``frequent_itemset_data`` is None when there were no transactions to mine.
    """

    def __init__(self, frequent_itemset_data=None, rules=None, mining_time_ms=0.0, rule_time_ms=0.0):
        self.frequent_itemset_data = frequent_itemset_data
        self.rules = list(rules) if rules is not None else []
        self.mining_time_ms = mining_time_ms
        self.rule_time_ms = rule_time_ms

    @property
    def frequent_itemsets(self):
        if self.frequent_itemset_data is None:
            return []
        return list(self.frequent_itemset_data.frequent_itemset_list)

    def itemsets_frame(self):
        data = self.frequent_itemset_data
        itemsets = self.frequent_itemsets
        no_of_transactions = data.no_of_transactions if data is not None else 1

        counts = np.array([data.get_support_count(itemset) for itemset in itemsets], dtype=np.int64)
        return pd.DataFrame({
            'itemset': [tuple(itemset.sorted_items()) for itemset in itemsets],
            'size': np.array([len(itemset) for itemset in itemsets], dtype=np.int64),
            'support_count': counts,
            'support': counts / no_of_transactions,
        }, columns=['itemset', 'size', 'support_count', 'support'])

    def rules_frame(self):
        data = self.frequent_itemset_data
        return pd.DataFrame({
            'antecedent': [tuple(rule.antecedent.sorted_items()) for rule in self.rules],
            'consequent': [tuple(rule.consequent.sorted_items()) for rule in self.rules],
            'support': [data.get_support(rule.itemset) for rule in self.rules],
            'confidence': [rule.confidence for rule in self.rules],
        }, columns=['antecedent', 'consequent', 'support', 'confidence'])

    # ############################# text report #############################
    def format_report(self):
        lines = ["<------- Frequent itemsets ------->"]

        data = self.frequent_itemset_data
        for index, itemset in enumerate(self.frequent_itemsets, 1):
            lines.append("%2d: %9s, support: %.3f" % (index, itemset, data.get_support(itemset)))

        lines.append("")
        lines.append("<------- Association rules ------->")

        for index, rule in enumerate(self.rules, 1):
            lines.append("%2d: %s -> %s: %.3f" % (index, rule.antecedent, rule.consequent, rule.confidence))

        return "\n".join(lines) + "\n"

    def write_report(self, path):
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)

        with open(path, 'w') as f:
            f.write(self.format_report())
