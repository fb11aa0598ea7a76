"""Downstream consumers of processed term sheets.

This module holds the command handlers for database logging and the
two partner notifications, plus the contracts they depend on.
"""
