"""Problem-details bodies for documented error responses (status >= 400)."""

import json
from http import HTTPStatus
from typing import Protocol

DEFAULT_PROBLEM_TYPE = "http://www.w3.org/Protocols/rfc2616/rfc2616-sec10.html"


class ProblemRenderer(Protocol):
    def render(self, code: int, message: str) -> str: ...


class ApiProblemRenderer:
    """Renders an API Problem as compact JSON: type, title, status, detail."""

    def __init__(self, problem_type: str = DEFAULT_PROBLEM_TYPE):
        self.problem_type = problem_type

    def render(self, code: int, message: str) -> str:
        status = code if 100 <= code <= 599 else 500
        payload = {
            "type": self.problem_type,
            "title": _status_title(status),
            "status": status,
            "detail": message,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _status_title(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Unknown"
