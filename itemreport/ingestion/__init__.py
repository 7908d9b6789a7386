"""Data ingestion module for ItemReport.

Loads line items from JSON, YAML, or CSV files for the command line.
"""

from itemreport.ingestion.items import load_items

__all__ = ["load_items"]
