"""
The MODEL layer contains pure data structures: geometric primitives, profile
curves and generator parameters.
It has NO knowledge of the Visualization (PyVista).
"""
