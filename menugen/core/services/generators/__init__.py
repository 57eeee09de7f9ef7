"""
Generators — produce registration modules from menu configs.

``dialects`` knows how a module is written in each output language;
``menu_module`` scans template roots and writes one module per config.
"""
