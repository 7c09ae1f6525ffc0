"""Samazama - shorthand matching for quiz and flashcard input.

Matches abbreviated, reordered or phonetically altered input against full
answers using two reductions:
1. Soundex codes that skip silent English digraphs
2. Order-preserving variants made by stripping repeated characters
"""

__version__ = "0.1.0"
