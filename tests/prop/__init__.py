"""
Property-based tests for the MOV decoders.

Hypothesis strategies build well-formed encodings together with the number
of bytes each one must consume.
"""
