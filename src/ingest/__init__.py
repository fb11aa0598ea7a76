"""Term sheet ingestion.

This module reads term sheet documents, extracts the required fields,
and runs the one-shot cycle that publishes accepted records.
"""
