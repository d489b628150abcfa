"""Shell session state, prompt, history, PATH lookup and line editing, with C-style text, formatting and data-structure helpers."""

__version__ = "0.1.0"