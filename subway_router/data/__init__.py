"""
Bundled subway data.
"""
