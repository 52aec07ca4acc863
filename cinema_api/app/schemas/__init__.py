"""
Pydantic schema definitions for API documentation.

Request and response bodies are passed through as plain JSON objects,
so these models are never used to validate input.  They describe the
fields each collection is expected to hold and provide the examples
shown in the generated OpenAPI document.
"""
