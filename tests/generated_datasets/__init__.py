# tests/generated_datasets/__init__.py

"""
Generated Datasets Sub-Package for ID3 Decision Tree Tests
"""

# This file makes the `generated_datasets` directory a Python sub-package.
# The generators return tables (header row first) of string-valued records.
