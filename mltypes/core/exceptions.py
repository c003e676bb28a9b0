"""
Exception hierarchy for mltypes.

All exceptions inherit from MLTypesError to allow catching any
library-specific error. Shape and index failures share a single kind,
DimensionMismatch, so callers can guard a whole block of arithmetic with
one except clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Operations raise before producing or mutating anything
"""


class MLTypesError(Exception):
    """Base exception for all mltypes errors."""
    pass


class ValidationError(MLTypesError):
    """
    Input validation failed.

    Raised when user-provided inputs (sizes, ranges, element data, option
    names) fail validation checks.
    """
    pass


class DimensionMismatch(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised when two vectors differ in size, two matrices differ in shape,
    inner dimensions of a product disagree, or a grid is jagged or empty.

    Attributes:
        operation: Name of the operation that was attempted
        expected: Shape or size the operation required
        actual: Shape or size that was supplied
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: object = None,
        actual: object = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IndexOutOfRange(DimensionMismatch, IndexError):
    """
    Element, row or column index is outside the valid range.

    Negative indices are never wrapped; the valid range is [0, bound).

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of the valid range
        axis: Which axis was indexed ('element', 'row' or 'column')
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message, operation='index', expected=bound, actual=index)
        self.index = index
        self.bound = bound
        self.axis = axis


class ScalarTypeMismatch(ValidationError, TypeError):
    """
    Element types of the operands are incompatible.

    Raised when two containers with different dtypes are combined, or a
    scalar cannot be represented exactly in a container's element type.

    Attributes:
        expected: Name of the required scalar type
        actual: Name of the supplied scalar type (or the offending value)
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: object = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
