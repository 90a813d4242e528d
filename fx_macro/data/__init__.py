"""
Input models, validation and parsing for scoring passes.
"""
