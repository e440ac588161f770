"""Canvas node sizing, tree checks, affordance numbering and shared state for breadboards."""

__version__ = "0.1.0"