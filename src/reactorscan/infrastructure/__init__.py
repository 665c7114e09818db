"""reactorscan infrastructure layer: adapters for external interfaces."""
