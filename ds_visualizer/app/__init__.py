"""
HTTP control surface.
"""
