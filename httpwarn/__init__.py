"""
httpwarn: parse, check and format HTTP Warning header values.
"""

__version__ = "1.0.0"
