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
Kinase-substrate network from the OmniPath enzyme-PTM table.

Only phosphorylation and dephosphorylation are kept.  Targets are
phosphosites, e.g. ``MAPK1_T185`` for threonine 185 of MAPK1.  If an
enzyme both phosphorylates and dephosphorylates a site, the
interaction is taken as dephosphorylation.  Records without residue
offset are dropped.
"""

from __future__ import annotations

__all__ = ['get_ksn_omnipath', 'site_key']

import logging

import pandas as pd

from .._client import OmnipathClient

_log = logging.getLogger(__name__)

_MODIFICATIONS = {
    'phosphorylation': 1,
    'dephosphorylation': -1,
}


def site_key(substrate: str, residue_type: str, residue_offset: int) -> str:
    """Target ID of a modified residue, e.g. ``'MAPK1_T185'``."""

    return f'{substrate}_{residue_type}{int(residue_offset)}'


def get_ksn_omnipath(
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
    **kwargs,
) -> pd.DataFrame:
    """
    OmniPath kinase-substrate network.

    Args:
        client:
            OmniPath data access; a client from *cfg* is used if
            ``None``.
        cfg:
            Config as returned by :func:`config`; the built-in
            defaults if ``None``.
        **kwargs:
            Passed to the enzyme-PTM query.

    Returns:
        DataFrame with columns ``source`` (enzyme), ``target``
        (phosphosite) and ``mor`` (1 or -1), one row per source and
        target, sorted by both.
    """

    client = client or OmnipathClient.from_config(cfg)
    es = client.enzsub(**kwargs)
    es = es[es['modification'].isin(_MODIFICATIONS)]
    no_offset = es['residue_offset'].isna()

    if no_offset.any():
        _log.warning(
            '[OmniPath] Dropped %d enzyme-PTM interactions without '
            'residue offset.',
            int(no_offset.sum()),
        )
        es = es[~no_offset]

    ksn = pd.DataFrame({
        'source': es['enzyme_genesymbol'],
        'target': [
            site_key(*site)
            for site in zip(
                es['substrate_genesymbol'],
                es['residue_type'],
                es['residue_offset'],
            )
        ],
        'mor': es['modification'].map(_MODIFICATIONS).astype(int),
    }, columns=['source', 'target', 'mor'])

    ksn = (
        ksn.drop_duplicates()
        .groupby(['source', 'target'], sort=True, as_index=False)['mor']
        .min()
    )

    _log.info(
        '[OmniPath] %d enzyme-PTM interactions after preprocessing.',
        len(ksn),
    )

    return ksn
