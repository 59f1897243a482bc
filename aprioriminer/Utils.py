import numbers

import numpy as np


# ############################# threshold checks #############################
def check_threshold(value, name):
    """Validate a fraction in [0, 1] and return it as a float.

    Raises ValueError when ``value`` is not a real number, is NaN, or lies
    outside the unit interval.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValueError("The input %s is not a number: %r" % (name, value))

    if np.isnan(float(value)):
        raise ValueError("The input %s is NaN." % name)

    if value < 0.0:
        raise ValueError("The input %s is too small: %s, should be at least 0.0" % (name, value))

    if value > 1.0:
        raise ValueError("The input %s is too large: %s, should be at most 1.0" % (name, value))

    return float(value)


def count_to_support(count, no_of_transactions):
    return count / no_of_transactions
