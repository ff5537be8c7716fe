# id3_tree/utils.py
from collections import Counter

import numpy as np
import pandas as pd


def count_labels(labels):
    """
    Count label frequencies, keeping the order in which labels are first seen.
    Counter is an insertion-ordered dict, so iteration follows row order.
    """
    return Counter(labels)


def calculate_entropy(labels):
    """
    Shannon entropy (in bits) of a sequence of class labels.

    H = -sum(p_i * log2(p_i)) over the observed labels, p_i = count_i / total.
    Labels that never occur are simply absent from the sum, so there is no
    0 * log2(0) term.

    Args:
        labels (sequence of str): Non-empty sequence of labels.

    Returns:
        float: The entropy. Exactly 0.0 for a single-class sequence.
    """
    label_counts = count_labels(labels)
    if not label_counts:
        raise ValueError("Entropy is undefined for an empty set of labels.")
    if len(label_counts) == 1:
        return 0.0

    counts = np.fromiter(label_counts.values(), dtype=float, count=len(label_counts))
    p = counts / counts.sum()
    return float(-np.sum(p * np.log2(p)))


def majority_label(labels):
    """
    Most frequent label. Ties go to the label that reached the maximum count
    first in row order (max() keeps the first maximal key it meets).
    """
    label_counts = count_labels(labels)
    if not label_counts:
        raise ValueError("Majority label is undefined for an empty set of labels.")
    return max(label_counts, key=label_counts.get)


def is_homogeneous(labels):
    """True when every label in the (non-empty) sequence is identical."""
    first = labels[0]
    return all(label == first for label in labels)


# --- Pandas DataFrame Utilities ---

def is_pandas_dataframe(data):
    """Checks if the provided data is a Pandas DataFrame."""
    return isinstance(data, pd.DataFrame)


def convert_pandas_to_list_of_dicts(dataframe):
    """
    Converts a Pandas DataFrame to a list of dictionaries.
    """
    if not is_pandas_dataframe(dataframe):
        raise TypeError("Input is not a Pandas DataFrame.")
    return dataframe.to_dict(orient='records')


def convert_pandas_to_table(dataframe, target_column=None):
    """
    Converts a DataFrame into a table (header first, then rows) of strings,
    with the target column moved to the last position.

    Args:
        dataframe (pd.DataFrame): Input data; every cell is converted with str().
        target_column (str, optional): Label column. Defaults to the last column.

    Returns:
        list of list of str: The header row followed by the data rows.
    """
    if not is_pandas_dataframe(dataframe):
        raise TypeError("Input is not a Pandas DataFrame.")

    columns = [str(c) for c in dataframe.columns]
    if target_column is not None:
        if target_column not in columns:
            raise ValueError(f"Target column '{target_column}' not found in DataFrame columns: {columns}")
        columns = [c for c in columns if c != target_column] + [target_column]
        dataframe = dataframe.rename(columns=str)[columns]

    if dataframe.isna().any().any():
        raise ValueError("Missing values are not supported; every cell must hold a value.")

    rows = dataframe.astype(str).values.tolist()
    return [columns] + rows
