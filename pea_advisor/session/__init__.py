"""
Session view state.

Modules
-------
state : Page + SessionState + transition functions.
"""
