"""
Export module for flattened concept CSV generation.
"""
from harvestdoc.export.csv_emitter import CSVEncoder, HEADER, flatten

__all__ = [
    "CSVEncoder",
    "HEADER",
    "flatten",
]
