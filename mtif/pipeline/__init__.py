"""
pipeline package
----------------
Conversion of export files into per-entry YAML, and the ``mtif`` CLI.
"""
