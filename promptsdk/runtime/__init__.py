"""Template runtime.

Pure functions only: no I/O, no shared state.
"""
from .renderer import PromptRenderer
from .template import extract_variable_names, missing_variables, pick_variables, replace_variables
