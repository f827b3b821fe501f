"""Native concatenation adapters."""

from daycatalog.adapters.concat.native import CopyFileRangeConcat, UnsupportedConcat


__all__ = ["CopyFileRangeConcat", "UnsupportedConcat"]
