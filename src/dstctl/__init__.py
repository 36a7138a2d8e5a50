"""dstctl — CET/CEST daylight-saving rules and local/UTC conversion."""

__version__ = "0.1.0"
