"""Activities & Programs dashboard service.

The package exposes a static catalog of school activities and the derived
views (metrics, filtered rows and timeline) consumed by the dashboard page.
"""
