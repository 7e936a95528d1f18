"""
nflz - Numbered Filenames with Leading Zeroes

Renames files like "paris (1).jpg" ... "paris (734).jpg" so that every
numbered group of a directory has the same number of digits.
"""

__version__ = "1.0.0"
