# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for parsed CTO models."""

from ctoparse.validation.checks import ValidationError, ValidationResult, ValidationWarning, validate

__all__ = [
    "validate",
    "ValidationResult",
    "ValidationWarning",
    "ValidationError",
]
