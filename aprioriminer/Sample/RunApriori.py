import argparse
import logging
import sys

from aprioriminer.Apriori import Apriori
from aprioriminer.TransactionReader import read_transactions
from aprioriminer.Utils import check_threshold

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Mine frequent itemsets and association rules from a market-basket file.")
    parser.add_argument("input", help="transaction file, one transaction per line")
    parser.add_argument("-o", "--output", help="report file to write; the report is printed when omitted")
    parser.add_argument("--min-support", type=float, help="minimum support, within [0, 1]")
    parser.add_argument("--min-confidence", type=float, help="minimum confidence, within [0, 1]")
    parser.add_argument("--delimiter", default=None, help="item separator; whitespace by default")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each mining level")
    return parser.parse_args(argv)


def prompt_threshold(name):
    while True:
        answer = input("Enter minimum %s: " % name)
        try:
            return float(answer)
        except ValueError:
            print("Not a number: %r" % answer)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    min_support = args.min_support if args.min_support is not None else prompt_threshold("support")
    min_confidence = args.min_confidence if args.min_confidence is not None else prompt_threshold("confidence")

    try:
        min_support = check_threshold(min_support, "minimum support")
        min_confidence = check_threshold(min_confidence, "minimum confidence")
    except ValueError as e:
        logger.error("%s", e)
        return 1

    try:
        transactions = read_transactions(args.input, args.delimiter)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1
    logger.info("Read %d transactions from %s", len(transactions), args.input)

    apriori = Apriori(min_support=min_support, min_confidence=min_confidence, input_data=transactions)

    associations = apriori.fit()

    if associations.frequent_itemset_data is None:
        logger.warning("No transactions in %s, nothing mined.", args.input)

    if args.output:
        associations.write_report(args.output)
        logger.info("Report written to %s", args.output)
    else:
        sys.stdout.write(associations.format_report())

    return 0


if __name__ == "__main__":
    sys.exit(main())
