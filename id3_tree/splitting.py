# id3_tree/splitting.py
import numpy as np

from .utils import calculate_entropy

# Below every attainable gain, so the first attribute always replaces it.
GAIN_SENTINEL = -1.0


def partition_rows(rows: np.ndarray, attribute_index: int):
    """
    Group the rows of a node by their value in one attribute column.

    Args:
        rows (np.ndarray): 2-D array of string fields, one row per sample.
        attribute_index (int): Column to group on.

    Returns:
        dict: observed value -> row sub-array. Keys follow the order in which each
              value first occurs, and every group holds at least one row.
    """
    column = rows[:, attribute_index]
    partitions = {}
    for value in dict.fromkeys(column.tolist()):
        partitions[value] = rows[column == value]
    return partitions


def calculate_remainder(partitions, total_rows: int, label_index: int):
    """Weighted entropy sum(|g| / |rows| * H(g)) over the value groups."""
    remainder = 0.0
    for group_rows in partitions.values():
        weight = group_rows.shape[0] / total_rows
        remainder += weight * calculate_entropy(group_rows[:, label_index].tolist())
    return remainder


def calculate_information_gain(
    rows: np.ndarray,
    attribute_index: int,
    label_index: int,
    base_entropy: float = None
):
    """
    Information gain of splitting `rows` on one attribute.

    Gain = H(rows) - sum over value groups g of |g| / |rows| * H(g).
    The value is a sum over groups, so it does not depend on group order.

    Args:
        rows (np.ndarray): Non-empty 2-D array of string fields.
        attribute_index (int): A non-label column of `rows`.
        label_index (int): The label column of `rows`.
        base_entropy (float, optional): H(rows) if the caller already has it.

    Returns:
        float: The gain, in [-eps, H(rows)].
    """
    if base_entropy is None:
        base_entropy = calculate_entropy(rows[:, label_index].tolist())

    partitions = partition_rows(rows, attribute_index)
    remainder = calculate_remainder(partitions, rows.shape[0], label_index)
    return base_entropy - remainder


def find_best_attribute(
    rows: np.ndarray,
    headers,
    base_entropy: float,
    on_gain=None
):
    """
    Evaluate every attribute column of a node and pick the most informative one.

    Attributes are scanned left to right and only a strictly greater gain
    replaces the current best, so ties go to the lowest column index.

    Args:
        rows (np.ndarray): Rows of the node (label in the last column).
        headers (list of str): Column names matching `rows`, label last.
        base_entropy (float): Label entropy of `rows`.
        on_gain (callable, optional): Called as on_gain(attribute, gain) for each
            evaluated attribute.

    Returns:
        tuple: (best_index, best_gain, gains) where gains maps attribute name to its
               gain. best_index is None when there are no attribute columns.
    """
    label_index = len(headers) - 1
    best_index = None
    best_gain = GAIN_SENTINEL
    gains = {}

    for attribute_index, attribute in enumerate(headers[:label_index]):
        gain = calculate_information_gain(rows, attribute_index, label_index, base_entropy)
        gains[attribute] = gain
        if on_gain is not None:
            on_gain(attribute, gain)

        if gain > best_gain:
            best_gain = gain
            best_index = attribute_index

    return best_index, best_gain, gains
