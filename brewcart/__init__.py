"""Cart state engine and checkout workflow for the Brew Home storefront."""

__version__ = "1.0.0"
