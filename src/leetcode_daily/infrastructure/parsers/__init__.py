"""Parsers for extracting data from LeetCode pages."""

from .problemset_parser import ProblemsetPageParser

__all__ = ["ProblemsetPageParser"]
