"""Release validator: cross-check commit history against the issue tracker."""

__version__ = "0.1.0"
