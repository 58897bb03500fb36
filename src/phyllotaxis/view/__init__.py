"""
The VIEW layer renders generated organs with PyVista.
It is never imported by the generators.
"""
