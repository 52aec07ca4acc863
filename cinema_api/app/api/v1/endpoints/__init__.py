"""
Endpoint subpackage for API v1.

Each module defines the APIRouter of one resource.  The routers are
aggregated in ``router.py`` at the package level.
"""
