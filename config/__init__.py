"""
config package
--------------

Project paths and the bundled JSON data (constants, predefined protocols).
"""
