"""
Utility modules for the Subway Router application.
"""
