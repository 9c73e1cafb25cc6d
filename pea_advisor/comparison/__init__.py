"""
Asset comparator.

Modules
-------
comparator : ComparisonSelection + add/remove/toggle + search_catalog()
             + comparison_rows().
"""
