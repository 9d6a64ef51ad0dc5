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
Mode of regulation from direction-of-effect flags.

The functions here work on single records, independently of any table,
and the builders map them over their columns.
"""

from __future__ import annotations

__all__ = [
    'Evidence',
    'classify_evidence',
    'resolve_sign',
    'stimulation_sign',
]

import enum
from typing import Any

import pandas as pd


class Evidence(enum.Enum):
    """Which kinds of directional evidence a record carries."""

    STIMULATION = 'stimulation'
    INHIBITION = 'inhibition'
    BOTH = 'both'
    NEITHER = 'neither'


def _flag(value: Any) -> bool:
    """Truth value of a flag column entry; missing counts as false."""

    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return False

    return bool(value)


def classify_evidence(is_stimulation: Any, is_inhibition: Any) -> Evidence:
    """
    Classify a record by its stimulation and inhibition flags.

    Args:
        is_stimulation: Stimulation flag (bool, 0/1 or missing).
        is_inhibition: Inhibition flag (bool, 0/1 or missing).
    """

    stim = _flag(is_stimulation)
    inhib = _flag(is_inhibition)

    if stim and inhib:
        return Evidence.BOTH

    if stim:
        return Evidence.STIMULATION

    if inhib:
        return Evidence.INHIBITION

    return Evidence.NEITHER


def resolve_sign(
    evidence: Evidence,
    consensus_stimulation: Any = None,
    unsigned_mor: int | None = 1,
) -> int | None:
    """
    Mode of regulation of a record.

    Records with both kinds of evidence follow the consensus: +1 if the
    consensus is stimulation, -1 otherwise.  Records without any
    directional evidence get *unsigned_mor*.

    Args:
        evidence: Output of :func:`classify_evidence`.
        consensus_stimulation: Consensus stimulation flag, only used
            for :attr:`Evidence.BOTH`.
        unsigned_mor: Sign assigned to :attr:`Evidence.NEITHER`; ``None``
            leaves these records without a sign.

    Returns:
        ``1``, ``-1``, or ``None`` for unsigned records when
        *unsigned_mor* is ``None``.
    """

    if evidence is Evidence.BOTH:
        return 1 if _flag(consensus_stimulation) else -1

    if evidence is Evidence.STIMULATION:
        return 1

    if evidence is Evidence.INHIBITION:
        return -1

    if evidence is Evidence.NEITHER:
        return unsigned_mor

    raise ValueError(f'Unknown evidence: {evidence!r}')


def stimulation_sign(is_stimulation: Any) -> int | None:
    """
    Sign from a single stimulation flag.

    Returns:
        ``1`` for a true flag (``1``), ``-1`` for a false one (``0``),
        ``None`` for anything else, including missing values.
    """

    if isinstance(is_stimulation, str):
        return None

    try:
        return _STIMULATION_SIGNS.get(is_stimulation)
    except TypeError:
        return None


# hash-based, so numpy scalars and bools match too
_STIMULATION_SIGNS = {1: 1, 0: -1}
