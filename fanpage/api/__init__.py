"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from fanpage.api import app

    uvicorn fanpage.api:app --reload
"""

from fanpage.api.app import app

__all__ = ["app"]
