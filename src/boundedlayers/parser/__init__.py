"""Loaders turning solution files into dependency graphs."""

from boundedlayers.parser.solution import SolutionParser

__all__ = [
    "SolutionParser",
]
