"""vipergen -- scaffolding generator for VIPER modules."""

__version__ = "0.1.0"
