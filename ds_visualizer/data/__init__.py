"""
Static command vocabulary for every hosted structure.
"""
