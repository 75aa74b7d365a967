"""slicequota: slice-level resource usage aggregation for worker clusters."""

__version__ = "0.1.0"
