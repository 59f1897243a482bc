import logging
import time

import pandas as pd

from aprioriminer.AprioriMiner import mine
from aprioriminer.Associations import Associations
from aprioriminer.RuleGenerator import mine_association_rules
from aprioriminer.TransactionReader import transactions_from_frame, transactions_from_records
from aprioriminer.Utils import check_threshold

logger = logging.getLogger(__name__)


class Apriori:
    """Mines frequent itemsets and then association rules from a set of transactions.

    :param
    @min_support - fraction of transactions an itemset must occur in to be frequent
    @min_confidence - smallest confidence a rule must reach to be reported
    @input_data - market-basket data frame (one row per transaction), or a
        sequence of iterables of items

    This program is free software: you can redistribute it and/or modify it under the terms of the
    GNU General Public License as published by the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
    implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
    for more details.

    You should have received a copy of the GNU General Public License along with this program.
    If not, see <http://www.gnu.org/licenses/>.
    """
    def __init__(self,
                 min_support,
                 min_confidence,
                 input_data):
        self.min_support = check_threshold(min_support, "minimum support")
        self.min_confidence = check_threshold(min_confidence, "minimum confidence")
        if input_data is None:
            raise ValueError("The input data is None.")
        self.input_data = input_data

    def load_data(self):
        if isinstance(self.input_data, pd.DataFrame):
            return transactions_from_frame(self.input_data)
        return transactions_from_records(self.input_data)

    def fit(self):
        transactions = self.load_data()

        start = time.perf_counter()
        data = mine(transactions, self.min_support)
        mining_time_ms = (time.perf_counter() - start) * 1000
        logger.info("Mined frequent itemsets in %.0f milliseconds.", mining_time_ms)

        if data is None:
            return Associations(mining_time_ms=mining_time_ms)

        start = time.perf_counter()
        rules = mine_association_rules(data, self.min_confidence)
        rule_time_ms = (time.perf_counter() - start) * 1000
        logger.info("Mined association rules in %.0f milliseconds.", rule_time_ms)

        return Associations(data, rules, mining_time_ms, rule_time_ms)
