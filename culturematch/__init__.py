"""CultureMatch — match a company's culture against your workplace preferences."""

__version__ = "0.1.0"
