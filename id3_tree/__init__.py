# id3_tree/__init__.py

"""
ID3 Decision Tree Package
"""

# This file makes the `id3_tree` directory a Python package.
# The main estimator and the tree node types are exposed here for easier access.

from .dataset import Dataset
from .tree import ID3DecisionTree, DecisionNode, LeafNode, UNKNOWN_LABEL, build_tree, predict_record

VERSION = "0.1.0"
