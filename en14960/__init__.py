"""
en14960 - calculators and validators for BS EN 14960:2019, the safety
standard for inflatable play equipment.
"""

__version__ = "0.1.0"
