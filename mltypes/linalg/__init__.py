"""
Linear algebra module.

Generic Vector and Matrix containers over the supported numeric element
types, with dimension-checked arithmetic.

Public API:
    Vector, Matrix                  - the containers
    add, subtract, multiply, dot    - free-function forms of the operators
    hadamard_product, transpose     - named operations
    try_*                           - checked variants returning Checked
"""

from mltypes.linalg.vector import Vector
from mltypes.linalg.matrix import Matrix
from mltypes.linalg.operations import (
    add,
    subtract,
    multiply,
    dot,
    hadamard_product,
    scale,
    increase,
    decrease,
    transpose,
    map_elements,
    row,
    column,
    dot_row,
    as_row_matrix,
)
from mltypes.linalg.checked import (
    try_add,
    try_subtract,
    try_multiply,
    try_dot,
    try_hadamard_product,
    try_dot_row,
    try_row,
    try_column,
    try_get,
)

__all__ = [
    "Vector",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "dot",
    "hadamard_product",
    "scale",
    "increase",
    "decrease",
    "transpose",
    "map_elements",
    "row",
    "column",
    "dot_row",
    "as_row_matrix",
    "try_add",
    "try_subtract",
    "try_multiply",
    "try_dot",
    "try_hadamard_product",
    "try_dot_row",
    "try_row",
    "try_column",
    "try_get",
]
