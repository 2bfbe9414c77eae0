"""Fetch LeetCode's daily challenge and scaffold per-language solution stubs."""

__version__ = "0.1.0"
