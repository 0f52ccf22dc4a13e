"""
core package
------------
Exceptions, logging, paths and CLI statistics shared by the mtif tools.
"""
