"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Typed models for API responses
    └── {feature}.py      # Fetch functions and lookup tables

Only ``jma/`` (Japan Meteorological Agency forecast bulletins) exists today.
"""
