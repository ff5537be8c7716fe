# id3_tree/dataset.py
import warnings

import numpy as np

from .splitting import calculate_information_gain
from .utils import calculate_entropy, convert_pandas_to_table, is_pandas_dataframe


class Dataset:
    """
    Rows of string-valued attributes sharing one header, label column last.

    Every row has exactly as many fields as the header; rows that do not are
    rejected here so the induction code never sees them. The label entropy of the
    full row set is computed once and cached as the root information-gain baseline.
    """

    def __init__(self, headers, rows):
        self.headers = [str(h) for h in headers]
        if not self.headers:
            raise ValueError("Dataset header cannot be empty.")

        rows = list(rows)
        if not rows:
            raise ValueError("Training data cannot be empty.")

        num_columns = len(self.headers)
        for row_number, row in enumerate(rows, start=1):
            if len(row) != num_columns:
                raise ValueError(
                    f"Malformed row {row_number}: expected {num_columns} fields "
                    f"({', '.join(self.headers)}), got {len(row)}."
                )

        self.rows = np.array([[str(field) for field in row] for row in rows], dtype=object)
        self.entropy = calculate_entropy(self.labels.tolist())

    @classmethod
    def from_table(cls, table):
        """Build a Dataset from a table whose first record is the header."""
        table = list(table)
        if not table:
            raise ValueError("Table is empty; expected a header row.")
        return cls(table[0], table[1:])

    @classmethod
    def from_dataframe(cls, dataframe, target_column=None):
        """Build a Dataset from a DataFrame; the target column (default: last) becomes the label."""
        if not is_pandas_dataframe(dataframe):
            raise TypeError("Input is not a Pandas DataFrame.")
        return cls.from_table(convert_pandas_to_table(dataframe, target_column))

    @property
    def label_index(self):
        return len(self.headers) - 1

    @property
    def label_name(self):
        return self.headers[-1]

    @property
    def attributes(self):
        return self.headers[:-1]

    @property
    def labels(self):
        return self.rows[:, self.label_index]

    @property
    def num_samples(self):
        return self.rows.shape[0]

    def attribute_index(self, attribute_name):
        """Column of an attribute, or None when the name is not an attribute header."""
        try:
            return self.attributes.index(attribute_name)
        except ValueError:
            return None

    def information_gain(self, attribute_name):
        """
        Information gain of splitting the whole dataset on a named attribute.
        Unknown names (the label column included) warn and score 0.0.
        """
        attribute_index = self.attribute_index(attribute_name)
        if attribute_index is None:
            warnings.warn(f"Attribute not found: '{attribute_name}'. Reporting zero gain.", UserWarning)
            return 0.0
        return calculate_information_gain(self.rows, attribute_index, self.label_index, self.entropy)

    def drop_attribute(self, attribute_index, rows=None):
        """
        New Dataset without one attribute column.

        Args:
            attribute_index (int): Attribute column to remove (never the label).
            rows (np.ndarray, optional): Subset of this dataset's rows to keep.
                Defaults to all rows.
        """
        if not 0 <= attribute_index < self.label_index:
            raise IndexError(f"Attribute index {attribute_index} out of range for {len(self.attributes)} attributes.")
        if rows is None:
            rows = self.rows
        headers = self.headers[:attribute_index] + self.headers[attribute_index + 1:]
        return Dataset(headers, np.delete(rows, attribute_index, axis=1).tolist())

    def __len__(self):
        return self.num_samples

    def __repr__(self):
        return (f"Dataset(attributes={self.attributes}, label='{self.label_name}', "
                f"samples={self.num_samples}, entropy={self.entropy:.4f})")
