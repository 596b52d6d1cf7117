"""
Command line interface
"""
