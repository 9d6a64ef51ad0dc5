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
PROGENy pathway responsive genes.

Each pathway has a collection of target genes, with a weight and a
p-value per gene.  Only the most significant genes of each pathway are
kept.
"""

from __future__ import annotations

__all__ = ['get_progeny']

import logging
from numbers import Integral

import pandas as pd

from .._client import OmnipathClient
from .._config import builder_config, default_config
from .._errors import ConfigurationError
from .annotations import get_resource

_log = logging.getLogger(__name__)


def _top_genes(df: pd.DataFrame, top: int) -> pd.DataFrame:
    """The *top* genes with the lowest p-values, ties in table order."""

    return df.sort_values('p_value', kind='stable').head(top)


def get_progeny(
    organism: str | int | None = None,
    top: int | None = None,
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
) -> pd.DataFrame:
    """
    PROGENy model gene weights.

    Args:
        organism:
            Human, mouse or rat, by name or NCBI Taxonomy ID;
            defaults to the configured organism.
        top:
            Number of genes per pathway to return; defaults to the
            configured value, 500.
        client:
            OmniPath data access; a client from *cfg* is used if
            ``None``.
        cfg:
            Config as returned by :func:`config`; the built-in
            defaults if ``None``.

    Returns:
        DataFrame with columns ``source`` (pathway), ``target`` (gene),
        ``weight`` and ``p_value``, pathways in alphabetical order.

    Examples::

        progeny = get_progeny(organism='human', top=500)
    """

    cfg = default_config() if cfg is None else cfg
    top = builder_config('progeny', cfg)['top'] if top is None else top

    if isinstance(top, bool) or not isinstance(top, Integral) or top < 1:
        raise ConfigurationError(f'`top` must be a positive integer, got {top!r}.')

    p = get_resource('PROGENy', organism=organism, client=client, cfg=cfg)
    p = (
        p.drop_duplicates(subset=['pathway', 'genesymbol'], keep='first')
        .astype({'weight': 'float64', 'p_value': 'float64'})
        [['genesymbol', 'p_value', 'pathway', 'weight']]
    )

    groups = [_top_genes(df, top) for _, df in p.groupby('pathway', sort=True)]
    p = pd.concat(groups) if groups else p.iloc[:0]

    p = p[['pathway', 'genesymbol', 'weight', 'p_value']].reset_index(drop=True)
    p.columns = ['source', 'target', 'weight', 'p_value']

    _log.info(
        '[OmniPath] %d PROGENy genes in %d pathways.',
        len(p),
        p['source'].nunique(),
    )

    return p
