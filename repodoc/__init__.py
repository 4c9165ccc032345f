"""
repodoc
=======

Point at a GitHub repository, fetch a curated sample of its files, have a
generative model analyze them, and turn the analysis into a README.

Components:
- agents: Model-backed stages (analysis, README writing, fallback)
- services: GitHub access, file selection, content fetching, user store
- api: FastAPI endpoints
- models: Pydantic data models
- core: Configuration, exceptions and dependency wiring
"""

__version__ = "1.0.0"
