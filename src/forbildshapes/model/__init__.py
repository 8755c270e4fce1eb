"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the descriptor text; it deals with vectors, planes,
transforms, bounding conditions and the compiled primitive.
"""
