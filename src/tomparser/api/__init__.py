"""REST API for the tabular model parser."""
