"""
Command line interface for logingest.
"""
