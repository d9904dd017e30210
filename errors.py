# errors.py
# -------------------------------
# Error kinds surfaced by the name service. Each carries the callable-style
# status code and the HTTP status the API layer answers with.
# -------------------------------


class NameServiceError(Exception):
    """Base class for errors the API reports back to the caller."""

    code = "unknown"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": {
                "status": self.code.upper().replace("-", "_"),
                "message": self.message,
            }
        }


class InvalidArgumentError(NameServiceError):
    """The caller sent input we cannot use. Fixable by the caller."""

    code = "invalid-argument"
    http_status = 400


class InternalError(NameServiceError):
    """The registry lookup itself failed (timeout, connectivity, query error)."""

    code = "internal"
    http_status = 500
