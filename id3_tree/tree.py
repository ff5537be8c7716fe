# id3_tree/tree.py
import time

from .dataset import Dataset
from .utils import (
    majority_label,
    is_pandas_dataframe,
    convert_pandas_to_list_of_dicts
)
from .stopping import check_pre_split_stopping_conditions, check_post_split_stopping_condition
from .splitting import find_best_attribute, partition_rows

UNKNOWN_LABEL = "unknown"

# Gains at or below this count as "no improvement" (floating error around zero).
DEFAULT_MIN_GAIN = 1e-12


class LeafNode:
    is_leaf = True
    attribute = None

    def __init__(self, label, depth=0, num_samples=0, reason=None):
        self.label = label
        self.depth = depth
        self.num_samples = num_samples
        self.reason = reason
        self.children = {}

    def __repr__(self):
        return (f"LeafNode(label='{self.label}', depth={self.depth}, samples={self.num_samples}, "
                f"reason='{self.reason}')")


class DecisionNode:
    is_leaf = False
    label = None

    def __init__(self, attribute, children, depth=0, num_samples=0, gain=0.0):
        if not children:
            raise ValueError(f"Decision node on '{attribute}' needs at least one child.")
        self.attribute = attribute
        self.children = children
        self.depth = depth
        self.num_samples = num_samples
        self.gain = gain

    def __repr__(self):
        return (f"DecisionNode(attribute='{self.attribute}', depth={self.depth}, samples={self.num_samples}, "
                f"gain={self.gain:.4f}, values={list(self.children)})")


def iter_nodes(root):
    """Depth-first, pre-order walk over every node of a tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(node.children.values())))


def _ignore_event(event, depth, **fields):
    pass


def _build_node(dataset, depth, min_gain, emit):
    rows = dataset.rows
    headers = dataset.headers
    labels = dataset.labels.tolist()
    num_samples = len(labels)

    # 1. Terminal before any gain is computed: pure node or no attributes left
    stop_reason = check_pre_split_stopping_conditions(labels, num_attributes=len(dataset.attributes))
    if stop_reason:
        label = labels[0] if stop_reason == "pure_node" else majority_label(labels)
        emit("leaf", depth, label=label, reason=stop_reason, num_samples=num_samples)
        return LeafNode(label, depth=depth, num_samples=num_samples, reason=stop_reason)

    emit("node", depth, num_samples=num_samples, entropy=dataset.entropy)

    # 2. Score every remaining attribute, left to right
    best_index, best_gain, _ = find_best_attribute(
        rows, headers, dataset.entropy,
        on_gain=lambda attribute, gain: emit("gain", depth, attribute=attribute, gain=gain)
    )

    # 3. Nothing worth splitting on
    stop_reason = check_post_split_stopping_condition(best_index, best_gain, min_gain)
    if stop_reason:
        label = majority_label(labels)
        emit("leaf", depth, label=label, reason=stop_reason, num_samples=num_samples)
        return LeafNode(label, depth=depth, num_samples=num_samples, reason=stop_reason)

    # 4. Split: each child is its own Dataset, without the chosen column
    attribute = headers[best_index]
    emit("split", depth, attribute=attribute, gain=best_gain)

    children = {}
    for value, group_rows in partition_rows(rows, best_index).items():
        emit("branch", depth, attribute=attribute, value=value, num_samples=group_rows.shape[0])
        child_dataset = dataset.drop_attribute(best_index, rows=group_rows)
        children[value] = _build_node(child_dataset, depth + 1, min_gain, emit)

    return DecisionNode(attribute, children, depth=depth, num_samples=num_samples, gain=best_gain)


def build_tree(dataset, min_gain=DEFAULT_MIN_GAIN, emit=None):
    """
    Induce an ID3 tree from a Dataset and return its root node.

    At every node: a pure node becomes a leaf; a node without attributes left
    becomes a majority leaf; otherwise the attribute with the highest information
    gain (first in header order on ties) is chosen, unless that gain is not
    strictly greater than `min_gain`, in which case the node is a majority leaf.
    Recursion depth is bounded by the number of attributes, since each level
    drops one column.

    Args:
        dataset (Dataset): Training data, label column last.
        min_gain (float): Smallest gain (exclusive) that justifies a split.
            Use -1.0 to split on the best attribute whatever its gain.
        emit (callable, optional): Receives emit(event, depth, **fields) for every
            step of the induction.

    Returns:
        LeafNode or DecisionNode: The root of the tree.
    """
    if emit is None:
        emit = _ignore_event
    return _build_node(dataset, 0, min_gain, emit)


def predict_record(root, record):
    """
    Classify one record by walking the tree from the root.

    Args:
        root (LeafNode or DecisionNode): A built tree.
        record (dict): attribute name -> observed value.

    Returns:
        str: The label of the leaf reached, or UNKNOWN_LABEL when the record lacks a
             tested attribute or holds a value that was never seen on that branch.
    """
    node = root
    while not node.is_leaf:
        if node.attribute not in record:
            return UNKNOWN_LABEL
        child = node.children.get(record[node.attribute])
        if child is None:
            return UNKNOWN_LABEL
        node = child
    return node.label


def format_tree(root):
    """Text rendering of a tree, child values sorted at every level."""
    if root.is_leaf:
        return f"Leaf = {root.label}"

    lines = [f"Attribute = {root.attribute}"]

    def _format_children(node, indent, path):
        for value in sorted(node.children):
            child = node.children[value]
            full_path = f"{path} -> {value}" if path else value
            if child.is_leaf:
                lines.append(f"{indent}├── {full_path}: Leaf = {child.label}")
            else:
                lines.append(f"{indent}├── {value}: Attribute = {child.attribute}")
                _format_children(child, indent + "│   ", full_path)

    _format_children(root, "│   ", "")
    return "\n".join(lines)


class ID3DecisionTree:
    def __init__(
        self,
        min_gain=DEFAULT_MIN_GAIN,
        verbose=False,
        event_callback=None
    ):
        self.min_gain = min_gain
        self.verbose = verbose
        self.event_callback = event_callback

        self.root = None
        self.dataset = None
        self.feature_columns = []
        self.target_column = ''
        self.events = []

    def _as_dataset(self, data, target_column=None):
        if isinstance(data, Dataset):
            return data
        if is_pandas_dataframe(data):
            return Dataset.from_dataframe(data, target_column)
        if isinstance(data, (list, tuple)):
            return Dataset.from_table(data)
        raise TypeError("Input data must be a Dataset, a Pandas DataFrame or a table (list of rows, header first).")

    def _emit(self, event, depth, **fields):
        record = {'event': event, 'depth': depth, **fields}
        self.events.append(record)
        if self.event_callback is not None:
            self.event_callback(record)
        if self.verbose:
            print(self._format_event(record))

    @staticmethod
    def _format_event(record):
        indent = "  " * (record['depth'] + 1)
        event = record['event']
        if event == 'node':
            return f"{indent}Node (depth {record['depth']}): {record['num_samples']} samples, entropy={record['entropy']:.3f}"
        if event == 'gain':
            return f"{indent}  - Attribute \"{record['attribute']}\": Information Gain = {record['gain']:.3f}"
        if event == 'split':
            return f"{indent}Best attribute = {record['attribute']} (Gain={record['gain']:.3f})"
        if event == 'branch':
            return f"{indent}-> Creating subtree for {record['attribute']} = {record['value']} ({record['num_samples']} samples):"
        if event == 'leaf':
            reason = record['reason']
            if reason == 'pure_node':
                return f"{indent}All labels = {record['label']} -> Leaf"
            if reason == 'no_attributes_left':
                return f"{indent}No attributes left -> majority = {record['label']}"
            return f"{indent}No informative attribute -> majority = {record['label']}"
        return f"{indent}{record}"

    def fit(self, data, target_column=None):
        if self.verbose:
            fit_start_time = time.time()

        dataset = self._as_dataset(data, target_column)
        if self.verbose:
            print(f"ID3DecisionTree.fit started. Data has {dataset.num_samples} rows, "
                  f"{len(dataset.attributes)} attributes, entropy={dataset.entropy:.3f}.")

        self.dataset = dataset
        self.feature_columns = list(dataset.attributes)
        self.target_column = dataset.label_name
        self.events = []
        self.root = build_tree(dataset, min_gain=self.min_gain, emit=self._emit)

        if self.verbose:
            fit_end_time = time.time()
            print(f"ID3DecisionTree.fit completed in {fit_end_time - fit_start_time:.4f}s. "
                  f"Total nodes: {self.node_count}")
        return self

    def predict_one(self, record):
        if self.root is None: raise ValueError("Tree has not been fitted yet.")
        return predict_record(self.root, {str(k): str(v) for k, v in record.items()})

    def predict(self, data):
        """
        Predict labels for one record (dict), a list of records, or a DataFrame.
        A single dict yields a single label; the other inputs yield a list.
        """
        if self.root is None: raise ValueError("Tree has not been fitted yet.")

        if isinstance(data, dict):
            return self.predict_one(data)
        if is_pandas_dataframe(data):
            data_list_of_dicts = convert_pandas_to_list_of_dicts(data)
        elif isinstance(data, list):
            data_list_of_dicts = data
        else:
            raise TypeError("Input data must be a dict, a list of dicts or a Pandas DataFrame.")

        return [self.predict_one(row_dict) for row_dict in data_list_of_dicts]

    def get_params(self, deep=True):
        return {
            'min_gain': self.min_gain,
            'verbose': self.verbose,
            'event_callback': self.event_callback
        }

    @property
    def node_count(self):
        return 0 if self.root is None else sum(1 for _ in iter_nodes(self.root))

    @property
    def num_leaves(self):
        return 0 if self.root is None else sum(1 for node in iter_nodes(self.root) if node.is_leaf)

    @property
    def max_depth(self):
        return 0 if self.root is None else max(node.depth for node in iter_nodes(self.root))

    def format_tree(self):
        if self.root is None: return "Tree is empty."
        return format_tree(self.root)

    def print_tree(self):
        print(self.format_tree())
