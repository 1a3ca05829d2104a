"""
Scratchpad demo host for the idle watch plugin.
"""
