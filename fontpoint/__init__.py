"""
fontpoint: show the font resolved at the cursor and tint text by font family.
"""

__version__ = "0.1.0"
