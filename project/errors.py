class VolumeMountError(Exception):
    """Base class for errors raised while validating a volume mount."""

    kind = "VolumeMountError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def wrap(self, context: str):
        err = self.__class__(f"{context}: {self.message}")
        err.__cause__ = self
        return err


class MissingFieldError(VolumeMountError):
    kind = "MissingField"


class InvalidValueError(VolumeMountError):
    kind = "InvalidValue"


class NotFoundError(VolumeMountError):
    kind = "NotFound"
    status_code = 404


class InternalError(VolumeMountError):
    """Not caused by the request, e.g. a missing overlay validator."""

    kind = "InternalError"
    status_code = 500


def wrap_error(err: Exception, context: str):
    if isinstance(err, VolumeMountError):
        return err.wrap(context)
    wrapped = InternalError(f"{context}: {err}")
    wrapped.__cause__ = err
    return wrapped
