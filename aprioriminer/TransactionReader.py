import pandas as pd

from aprioriminer.Itemset import Itemset


def read_transactions(path, delimiter=None):
    """Read one transaction per non-blank line of a market-basket text file.

    Tokens are split on whitespace, or on ``delimiter`` when given.
    """
    with open(path, 'r') as f:
        rows = [[token.strip() for token in line.split(delimiter)] for line in f if line.strip()]

    # short rows are padded with '' the way market-basket frames are
    data = pd.DataFrame(rows).fillna('')

    return transactions_from_frame(data)


def transactions_from_frame(input_data):
    """Market-basket frame: each row is a transaction, each non-empty cell an item."""
    if input_data is None:
        raise ValueError("The input data is None.")

    transactions = []
    for row in input_data.itertuples(index=False, name=None):
        transactions.append(Itemset(item for item in row if not is_missing(item)))

    return transactions


def transactions_from_records(records):
    if records is None:
        raise ValueError("The transaction records are None.")

    return [Itemset(record) for record in records]


def is_missing(item):
    if isinstance(item, str):
        return item.strip() == ''
    return item is None or bool(pd.isna(item))
