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
DoRothEA gene regulatory network.

DoRothEA is a curated collection of transcription factors (TFs) and their
target genes.  Each interaction carries a confidence level from A (most
confident) to D, and stimulation / inhibition evidence.  Here every
interaction is weighted by its mode of regulation (+1 or -1) divided by
a per-level divisor, so that less confident edges get weights closer to
zero.
"""

from __future__ import annotations

__all__ = ['CONFIDENCE_LEVELS', 'get_dorothea']

import logging
from collections.abc import Iterable, Mapping
from numbers import Real

import pandas as pd

from .._client import OmnipathClient, QueryKind
from .._config import builder_config, default_config
from .._errors import ConfigurationError
from .._organism import configured_organism
from .._sign import classify_evidence, resolve_sign

_log = logging.getLogger(__name__)

CONFIDENCE_LEVELS = ('A', 'B', 'C', 'D')

_COLUMNS = [
    'source_genesymbol',
    'target_genesymbol',
    'is_stimulation',
    'is_inhibition',
    'consensus_direction',
    'consensus_stimulation',
    'consensus_inhibition',
    'dorothea_level',
]
_KEY = ['source_genesymbol', 'dorothea_level', 'target_genesymbol']


def _check_levels(levels: Iterable[str]) -> list[str]:

    levels = [levels] if isinstance(levels, str) else list(levels)
    unknown = sorted(set(levels) - set(CONFIDENCE_LEVELS))

    if unknown:
        raise ConfigurationError(
            f'Unknown DoRothEA confidence levels: {unknown}. '
            f'Available: {list(CONFIDENCE_LEVELS)}',
        )

    return levels


def _check_weights(weight_dict: Mapping[str, float]) -> dict[str, float]:
    """Every level needs a positive divisor."""

    missing = [lvl for lvl in CONFIDENCE_LEVELS if lvl not in weight_dict]

    if missing:
        raise ConfigurationError(
            f'`weight_dict` has no divisor for confidence levels {missing}.',
        )

    invalid = {
        lvl: weight_dict[lvl]
        for lvl in CONFIDENCE_LEVELS
        if isinstance(weight_dict[lvl], bool)
        or not isinstance(weight_dict[lvl], Real)
        or not weight_dict[lvl] > 0
    }

    if invalid:
        raise ConfigurationError(
            f'`weight_dict` divisors must be positive numbers: {invalid}.',
        )

    return {lvl: float(weight_dict[lvl]) for lvl in CONFIDENCE_LEVELS}


def _check_unsigned_mor(unsigned_mor: int | None) -> None:

    if unsigned_mor is None:
        return

    if isinstance(unsigned_mor, bool) or unsigned_mor not in (1, -1):
        raise ConfigurationError(
            f'`unsigned_mor` must be 1, -1 or None, got {unsigned_mor!r}.',
        )


def _best_level(level: str) -> str:
    """First, i.e. most confident, level of ``'A;B'`` style values."""

    return str(level).split(';')[0]


def _mor(df: pd.DataFrame, unsigned_mor: int | None) -> pd.Series:

    return pd.Series(
        [
            resolve_sign(
                classify_evidence(stim, inhib),
                consensus_stimulation=cons,
                unsigned_mor=unsigned_mor,
            )
            for stim, inhib, cons in zip(
                df['is_stimulation'],
                df['is_inhibition'],
                df['consensus_stimulation'],
            )
        ],
        index=df.index,
        dtype='float64',
    )


def get_dorothea(
    organism: str | int | None = None,
    levels: Iterable[str] | None = None,
    weight_dict: Mapping[str, float] | None = None,
    unsigned_mor: int | None = 1,
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
) -> pd.DataFrame:
    """
    DoRothEA gene regulatory network.

    Args:
        organism:
            Human, mouse or rat, by name or NCBI Taxonomy ID;
            defaults to the configured organism.
        levels:
            Confidence levels to return, from ``'A'`` (most confident)
            to ``'D'``.  Defaults to ``['A', 'B', 'C']``.
        weight_dict:
            Divisor of the mode of regulation for each confidence
            level.  All four levels are required.  Bigger values give
            weights closer to zero.  Defaults to
            ``{'A': 1, 'B': 2, 'C': 3, 'D': 4}``.
        unsigned_mor:
            Mode of regulation of interactions without any stimulation
            or inhibition evidence.  ``1`` (default) treats them as
            activations, ``-1`` as inhibitions; ``None`` drops them.
        client:
            OmniPath data access; a client from *cfg* is used if
            ``None``.
        cfg:
            Config as returned by :func:`config`, read for the defaults
            of the other arguments; the built-in defaults if ``None``.

    Returns:
        DataFrame with columns ``source``, ``confidence``, ``target``
        and ``mor``, one row per source, confidence and target.

    Raises:
        UnsupportedOrganism: Organism other than human, mouse or rat.
        ConfigurationError: Unknown levels, missing divisors or
            invalid ``unsigned_mor``.
        TransientFetchFailure: Both the live and the static download
            failed.

    Examples::

        dorothea = get_dorothea(organism='human', levels=['A', 'B'])
    """

    cfg = default_config() if cfg is None else cfg
    defaults = builder_config('dorothea', cfg)
    levels = _check_levels(defaults['levels'] if levels is None else levels)
    weights = _check_weights(
        defaults['weight_dict'] if weight_dict is None else weight_dict,
    )
    _check_unsigned_mor(unsigned_mor)
    organism = configured_organism(organism, cfg)
    client = client or OmnipathClient.from_config(cfg)

    do = client.with_fallback(
        lambda: client.interactions(
            'dorothea',
            organism,
            dorothea_levels=list(CONFIDENCE_LEVELS),
        ),
        QueryKind.INTERACTIONS,
        'dorothea',
        organism,
        dorothea_levels=levels,
    )

    do = do[_COLUMNS].drop_duplicates(subset=_KEY, keep='first').copy()
    do['dorothea_level'] = do['dorothea_level'].map(_best_level)
    # `A;B` and `A` collapse to the same key above
    do = do.drop_duplicates(subset=_KEY, keep='first').copy()

    do['mor'] = _mor(do, unsigned_mor)
    n_unsigned = int(do['mor'].isna().sum())

    if n_unsigned:
        _log.warning(
            '[OmniPath] Dropped %d DoRothEA interactions without '
            'stimulation or inhibition evidence.',
            n_unsigned,
        )
        do = do.dropna(subset=['mor'])

    do['mor'] = do['mor'] / do['dorothea_level'].map(weights)

    do = do[['source_genesymbol', 'dorothea_level', 'target_genesymbol', 'mor']]
    do.columns = ['source', 'confidence', 'target', 'mor']
    do = do[do['confidence'].isin(levels)].reset_index(drop=True)

    _log.info('[OmniPath] %d DoRothEA interactions.', len(do))

    return do
