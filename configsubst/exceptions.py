"""configsubst exceptions."""

from typing import Any


class InterpolationError(TypeError):
    """Raised when a config value cannot be interpolated.

    The config-object resolver catches this per key and degrades the
    key to the ``'null'`` sentinel instead of aborting the whole object.
    """

    def __init__(self, value: Any, message: str = ""):
        self.value_type = type(value).__name__

        if not message:
            message = f"Cannot interpolate value of type {self.value_type}"

        super().__init__(message)
