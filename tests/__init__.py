# tests/__init__.py

"""
Testing Package for ID3 Decision Tree
"""

# This file makes the `tests` directory a Python package.
# It can be used to import modules from the test harness or generated datasets.
# For example:
# from .test_harness import run_test_scenario
# from .generated_datasets import dataset_generator_categorical

VERSION = "0.1.0"
