"""Services built on top of parsed tabular models."""

from tomparser.service.describe import ModelDescription, describe_model

__all__ = ["ModelDescription", "describe_model"]
