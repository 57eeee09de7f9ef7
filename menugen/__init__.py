"""
menugen — generates "create from template" menu modules from folders of
script templates, whenever the project's assets change.
"""

__version__ = "0.1.0"
