"""
Terminal output for CLI commands.

Modules
-------
formatters : ASCII table / block formatters returning plain strings.
"""
