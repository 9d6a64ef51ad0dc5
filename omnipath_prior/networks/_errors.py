#!/usr/bin/env python

#
# This file is part of the `omnipath_prior` Python module
#
# Copyright 2026
# Heidelberg University Hospital
#
# File author(s): OmniPath Team (omnipathdb@gmail.com)
#
# Distributed under the BSD-3-Clause license
# See the file `LICENSE` or read a copy at
# https://opensource.org/license/bsd-3-clause
#

"""
Exceptions raised by the network builders.

Only :class:`TransientFetchFailure` is ever recovered inside the
package (by falling back to a static snapshot); everything else
reaches the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    'ConfigurationError',
    'OmnipathPriorError',
    'ResourceNotFound',
    'TransientFetchFailure',
    'UnsupportedOrganism',
]

from typing import Any


class OmnipathPriorError(Exception):
    """
    Base class of all errors raised by this package.

    Args:
        message: Human readable description.
        details: Additional context, shown after the message.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):

        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:

        if self.details:
            details = ', '.join(f'{k}={v!r}' for k, v in self.details.items())
            return f'{self.message} ({details})'

        return self.message


class UnsupportedOrganism(OmnipathPriorError, ValueError):
    """The organism is not one of human, mouse or rat."""

    def __init__(self, organism: Any):

        super().__init__(
            'Organism can only be human, mouse or rat, '
            f'`{organism}` provided.',
        )
        self.organism = organism


class TransientFetchFailure(OmnipathPriorError):
    """Retrieving a table from OmniPath failed."""

    def __init__(self, query: str, message: str | None = None):

        super().__init__(
            message or f'Failed to download `{query}` from OmniPath.',
            {'query': query},
        )
        self.query = query


class ResourceNotFound(OmnipathPriorError, LookupError):
    """An annotation resource is not available, neither live nor static."""

    def __init__(self, resource: str, message: str | None = None):

        super().__init__(
            message or (
                f'Failed to download annotation resource `{resource}` '
                'from OmniPath. Run `show_resources()` to see the list '
                'of available resources.'
            ),
        )
        self.resource = resource


class ConfigurationError(OmnipathPriorError, ValueError):
    """Invalid builder parameters, e.g. a missing confidence divisor."""
