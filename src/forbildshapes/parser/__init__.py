"""
The PARSER layer turns descriptor text into values: expressions into numbers,
vectors and planes, and clauses into ``ParsedAttributes``.
"""
