from __future__ import annotations


class PolylineError(ValueError):
    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    @property
    def detail(self) -> dict:
        return {"code": self.code, "message": self.message}


def bad_polyline(code: str, message: str):
    raise PolylineError(code, message)
