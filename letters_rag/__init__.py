"""
Shareholder letters retrieval pipeline.

Splits letters into chunks, indexes them behind a uniform store interface
(S3 Vectors or in-memory lexical scoring), ranks candidates under year
filters, expands queries with topics and context, and turns hits into
attributable insights for an agent layer.
"""

__version__ = "0.1.0"
