"""API layer: use cases, request validation, formatting and CLI.

Rules:
- MAY import shared, structuring, recovery, generation
- MUST NOT implement structuring or recovery logic directly
"""
