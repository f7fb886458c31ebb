"""FastAPI dependencies."""

from fastapi import Request

from swot.session import Session


def get_session(request: Request) -> Session:
    return request.app.state.session
