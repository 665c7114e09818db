"""reactorscan application layer.

Orchestrates discovery over domain objects through domain ports.
"""
