"""Domain models and the operation catalogue.

Nothing here knows about HTTP clients or the CLI: only what an operation
is (verb, path, argument shape).
"""
