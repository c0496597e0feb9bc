"""
gccarch: information on GCC's supported back-end architectures
"""

__version__ = "0.1.0"
__author__ = "gccarch Development Team"
