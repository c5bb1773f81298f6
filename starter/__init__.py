"""Camunda Spring Boot project starter.

Resolves a project request against the starter-version catalog and packages
the rendered project skeleton as a ZIP archive.
"""

__version__ = "0.1.0"
