"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request

from hello_app.state import AppState


def get_app_state(request: Request) -> AppState:
    """Return the AppState the app factory stored on the running application."""
    return request.app.state.hello  # type: ignore[no-any-return]


State = Annotated[AppState, Depends(get_app_state)]
