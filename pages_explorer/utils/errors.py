# /utils/errors.py
# Application error carrying the HTTP status and the user-visible message.
from dataclasses import dataclass


@dataclass
class AppError(Exception):
    status_code: int
    message: str

    def __str__(self) -> str:
        return self.message


def bad_request(msg: str) -> AppError:
    return AppError(400, msg)


def forbidden(msg: str) -> AppError:
    return AppError(403, msg)


def not_found(msg: str) -> AppError:
    return AppError(404, msg)


def upstream_error(msg: str) -> AppError:
    return AppError(502, msg)
