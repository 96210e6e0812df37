"""
Blog site shell: responsive sidebar navigation, page header and content
frame rendered with Dash and Bootstrap.
"""

__version__ = "0.1.0"
