from errors import InternalError
from errors import InvalidValueError
from errors import MissingFieldError
from errors import NotFoundError
from errors import wrap_error


def test_wrap_keeps_kind():
    err = NotFoundError("pod disk x not found")
    wrapped = err.wrap("get pod disks")
    assert isinstance(wrapped, NotFoundError)
    assert wrapped.status_code == 404
    assert str(wrapped) == "get pod disks: pod disk x not found"
    assert wrapped.__cause__ is err


def test_wrap_error():
    assert isinstance(wrap_error(MissingFieldError("x"), "ctx"), MissingFieldError)
    assert isinstance(wrap_error(InvalidValueError("x"), "ctx"), InvalidValueError)
    wrapped = wrap_error(ValueError("boom"), "ctx")
    assert isinstance(wrapped, InternalError)
    assert wrapped.status_code == 500
    assert str(wrapped) == "ctx: boom"
