class BaseError(Exception):
    """
    Base package exception.
    """


class InvalidArgumentError(BaseError):
    """
    An operation argument is out of the allowed range.
    """


class EmptyHeapError(BaseError):
    """
    A mutating operation is applied to an empty heap.
    """
