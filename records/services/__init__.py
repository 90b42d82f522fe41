"""
Service layer: the five record-keeping programs.

Each service owns its record stores, applies the program's rules and
reports outcomes on the console. Storage details stay in the repository
layer.
"""
