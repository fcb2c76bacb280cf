"""pinmodel: Objective-C model code generation from schema properties."""

__version__ = "0.1.0"
