"""Protobuf descriptor model and helpers for the REST bindings, request parameters, metadata and doc text of API client libraries."""

__version__ = "0.1.0"