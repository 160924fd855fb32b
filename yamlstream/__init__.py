"""Character inputs and classes for a YAML 1.2 scanner, and tools to generate and benchmark large YAML files."""

__version__ = "0.0.6"