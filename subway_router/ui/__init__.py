"""
UI-facing components for the Subway Router application.
"""
