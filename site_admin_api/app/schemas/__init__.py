"""
Pydantic schema definitions for API payloads.

Request bodies are described here; records coming back from the data
store are passed through as plain dictionaries.  Required fields are
deliberately declared optional on create payloads so that endpoints can
answer with the resource's own "missing fields" message.
"""
