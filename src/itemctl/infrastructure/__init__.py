"""Infrastructure layer — reading item collections from files and streams.

Depends on stdlib, pydantic, and the domain models it deserializes into.
It must never import from services, commands, or output.
"""
