# id3_tree/io.py
import csv
import os

import pandas as pd

from .dataset import Dataset

DEFAULT_DELIMITER = ','


def needs_delimiter(path):
    """Plain-text tables can use any delimiter; CSV files are always comma separated."""
    return os.path.splitext(path)[1].lower() != '.csv'


def read_table(path, delimiter=None):
    """
    Read a delimited text file into a table of strings, header row first.

    Args:
        path (str): CSV or TXT file.
        delimiter (str, optional): Field separator. Defaults to ','.

    Returns:
        list of list of str: Every record of the file, the header being the first one.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a record has fewer or more fields than the header.
    """
    if delimiter is None or not needs_delimiter(path):
        delimiter = DEFAULT_DELIMITER

    # Every cell is read as a string; no NA inference, so "NA" or "" stay literal values.
    # Quotes are ordinary characters, a field ends at every delimiter.
    # The python engine pads short records with NaN
    frame = pd.read_csv(
        path,
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        quoting=csv.QUOTE_NONE,
        engine='python',
    )

    # Short records are padded with NaN by the parser
    malformed = frame.isna().any(axis=1)
    if malformed.any():
        row_number = int(malformed.to_numpy().argmax())
        raise ValueError(
            f"Malformed row {row_number}: expected {frame.shape[1]} fields, "
            f"got {int(frame.iloc[row_number].notna().sum())}."
        )

    return frame.values.tolist()


def load_dataset(path, delimiter=None):
    """Read a file with read_table and wrap it in a Dataset."""
    return Dataset.from_table(read_table(path, delimiter))
