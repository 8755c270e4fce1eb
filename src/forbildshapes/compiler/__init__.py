"""
The COMPILER layer resolves orientation, builds the transform and assembles
the final primitive from ``ParsedAttributes``.
"""
