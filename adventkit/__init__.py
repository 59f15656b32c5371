"""Scaffold, run, benchmark and submit Advent of Code solutions."""

__version__ = "0.12.0"