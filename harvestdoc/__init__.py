"""
harvestdoc - export a Harvest concept catalog as CSV.
"""
__version__ = "0.1.0"
