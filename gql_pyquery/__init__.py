"""Build GraphQL queries, mutations and subscriptions from Python objects."""

__version__ = "0.1.0"
