"""
Tool catalog and the artifacts derived from it: page metadata, sitemap and
social preview images.
"""

__version__ = "1.0.0"
