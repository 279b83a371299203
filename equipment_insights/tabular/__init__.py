from .rows import COLUMN_MAP, TabularFormatError, load_csv, sample_from_row

__all__ = ["COLUMN_MAP", "TabularFormatError", "load_csv", "sample_from_row"]
