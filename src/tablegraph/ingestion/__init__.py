"""
Input readers for table relationship descriptions.
"""

from .csv_reader import read_records

__all__ = ["read_records"]
