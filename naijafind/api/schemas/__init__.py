"""
Request schemas - pydantic models for validating API input.

A ValidationError raised while parsing is turned into a 400
{"error": "Validation Error", "details": [...]} by the app error handler.
"""

from flask import request


def parse_body(schema):
    """Validates the JSON body against a schema. A missing body counts as {}."""
    return schema(**(request.get_json(silent=True) or {}))


def parse_args(schema):
    """Validates query string arguments; empty values are ignored."""
    args = {k: v for k, v in request.args.items() if v != ''}
    return schema(**args)
