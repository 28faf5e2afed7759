"""Solutions for Advent of Code 2025."""
