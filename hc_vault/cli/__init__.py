"""
hc-vault command line interface.
"""
