"""
Shared utilities for SexSec: error classes, error handling helpers and
logging configuration.
"""
