"""litdedent: strip source-level indentation from multi-line template literals."""

__version__ = "0.1.0"
