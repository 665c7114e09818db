"""reactorscan presentation layer: public entry points."""
