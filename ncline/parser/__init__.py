"""
Ncline Command Shell

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arguments import (
    SPACE_REPLACEMENT,
    generate_arguments,
    parse_named_arguments,
    transform_quoted_values,
)
from .signature import get_parameter_names, render_signature

__all__ = [
    "SPACE_REPLACEMENT",
    "generate_arguments",
    "parse_named_arguments",
    "transform_quoted_values",
    "get_parameter_names",
    "render_signature",
]
