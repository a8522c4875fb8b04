"""
stroption – blank-aware optional strings.

Import path convention::

    from stroption import EMPTY, StringOption
    from stroption.kernel.types import Nothing, Some
    from stroption.kernel.errors import InvalidArgumentError
    from stroption.observability.logging import JsonLoggerFactory
"""

from stroption.kernel.types import EMPTY, Nothing, Option, Some, StringOption

__version__ = "0.1.0"
__all__ = ["EMPTY", "Nothing", "Option", "Some", "StringOption", "__version__"]
