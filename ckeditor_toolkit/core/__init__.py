"""Business logic: plugin resolution, option models, rendering and services.

Nothing is re-exported here; import from the sub-packages.
"""
