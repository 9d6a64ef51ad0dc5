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
CollecTRI gene regulatory network.

CollecTRI is a curated collection of transcription factors (TFs) and their
target genes, an expansion of DoRothEA.  Each interaction is signed by its
mode of regulation (+1 or -1).

Some regulators are TF complexes, with an ID containing ``COMPLEX`` and a
gene symbol joining the symbols of the subunits (e.g. ``JUN_FOS``).  By
default these are renamed to the TF family they belong to:

- ``AP1``: any subunit matching ``JUN`` or ``FOS``
- ``NFKB``: any subunit matching ``REL`` or ``NFKB``

Complexes matching neither family are dropped.  With ``split_complexes``
the composite symbols are kept as they are.

For human, TF-miRNA interactions from CollecTRI are appended to the
TF-gene interactions.
"""

from __future__ import annotations

__all__ = ['get_collectri']

import json
import logging
import re
from collections.abc import Mapping, Sequence

import pandas as pd

from .._client import OmnipathClient, QueryKind
from .._config import builder_config, default_config
from .._errors import TransientFetchFailure
from .._organism import configured_organism
from .._sign import stimulation_sign

_log = logging.getLogger(__name__)

_COLUMNS = [
    'source_genesymbol',
    'target_genesymbol',
    'is_stimulation',
    'is_inhibition',
]
_META_COLUMNS = ['sources', 'references', 'sign_decision', 'TF_category']
_EXTRA_ATTRS = {
    'sign_decision': 'CollecTRI_sign_decision',
    'TF_category': 'CollecTRI_tf_category',
}
_PMID = re.compile(r'\d+')


def _attr_value(attrs, key: str):
    """One value from an ``extra_attrs`` entry (dict or JSON string)."""

    if isinstance(attrs, str):
        try:
            attrs = json.loads(attrs)
        except ValueError:
            return None

    if not isinstance(attrs, dict):
        return None

    value = attrs.get(key)

    if isinstance(value, (list, tuple)):
        value = ';'.join(map(str, value)) if value else None

    return value


def _extra_attrs_to_cols(df: pd.DataFrame, **columns: str) -> pd.DataFrame:
    """
    Add columns from the ``extra_attrs`` column.

    Args:
        df: Interactions, optionally with an ``extra_attrs`` column.
        **columns: New column names mapped to ``extra_attrs`` keys.
            Values already present in a column of that name are kept
            where ``extra_attrs`` has none.
    """

    df = df.copy()

    for column, key in columns.items():

        if 'extra_attrs' in df.columns:
            values = df['extra_attrs'].map(lambda a: _attr_value(a, key))
        else:
            values = pd.Series(None, index=df.index, dtype=object)

        if column in df.columns:
            values = values.combine_first(df[column])

        df[column] = values

    return df


def _family(symbol, families: Mapping[str, Sequence[str]]) -> str | None:
    """Name of the first TF family with a subunit pattern in *symbol*."""

    if not isinstance(symbol, str):
        return None

    for name, patterns in families.items():
        if any(pattern in symbol for pattern in patterns):
            return name

    return None


def _pmids(references) -> str:
    """PubMed IDs of a references field, e.g. ``'CollecTRI:123;ExTRI:45'``."""

    if not isinstance(references, str):
        return ''

    return ';'.join(_PMID.findall(references))


def _tf_mirna(client: OmnipathClient, organism: int, resources: str) -> pd.DataFrame | None:

    try:
        return client.interactions('tf_mirna', organism, resources=resources)
    except TransientFetchFailure:
        _log.error(
            '[OmniPath] Failed to download TF-miRNA interactions from '
            'OmniPath. Proceeding with TF-gene interactions only.',
            exc_info=True,
        )

    return None


def get_collectri(
    organism: str | int | None = None,
    split_complexes: bool = False,
    load_meta: bool = False,
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
    **kwargs,
) -> pd.DataFrame:
    """
    CollecTRI gene regulatory network.

    Args:
        organism:
            Human, mouse or rat, by name or NCBI Taxonomy ID;
            defaults to the configured organism.
        split_complexes:
            Keep TF complexes under their composite symbol instead of
            renaming them to AP1 or NFKB.
        load_meta:
            Also return the resources, PubMed references, sign decision
            and TF category of each interaction.
        client:
            OmniPath data access; a client from *cfg* is used if
            ``None``.
        cfg:
            Config as returned by :func:`config`, providing the complex
            marker and families; the built-in defaults if ``None``.
        **kwargs:
            Passed to the CollecTRI interactions query.

    Returns:
        DataFrame with columns ``source``, ``target`` and ``mor``; with
        ``load_meta`` also ``resources``, ``PMIDs``, ``sign_decision``
        and ``TF_category``.  One row per source and target.

    Raises:
        UnsupportedOrganism: Organism other than human, mouse or rat.
        TransientFetchFailure: Both the live and the static download
            failed.

    Examples::

        collectri = get_collectri(organism='human', split_complexes=False)
    """

    cfg = default_config() if cfg is None else cfg
    params = builder_config('collectri', cfg)
    organism = configured_organism(organism, cfg)
    client = client or OmnipathClient.from_config(cfg)

    ct = client.with_fallback(
        lambda: client.interactions('collectri', organism, **kwargs),
        QueryKind.INTERACTIONS,
        'collectri',
        organism,
    )

    if organism == 9606:
        mirna = _tf_mirna(client, organism, params['mirna_resources'])

        if mirna is not None:
            ct = pd.concat([ct, mirna], ignore_index=True)

    ct = _extra_attrs_to_cols(ct, **_EXTRA_ATTRS)

    id_col = 'source' if 'source' in ct.columns else 'source_genesymbol'
    is_complex = ct[id_col].astype(str).str.contains(
        params['complex_marker'],
        regex=False,
    )

    cols = _COLUMNS + (_META_COLUMNS if load_meta else [])
    ct = ct.reindex(columns=cols)
    simple = ct[~is_complex]
    complexes = ct[is_complex].copy()

    if not split_complexes:
        families = params['complexes']
        complexes['source_genesymbol'] = complexes['source_genesymbol'].map(
            lambda symbol: _family(symbol, families),
        )

    ct = (
        pd.concat([simple, complexes])
        .drop_duplicates(
            subset=['source_genesymbol', 'target_genesymbol'],
            keep='first',
        )
        .dropna(subset=['source_genesymbol'])
        .copy()
    )

    ct['mor'] = ct['is_stimulation'].map(stimulation_sign)
    n_unsigned = int(ct['mor'].isna().sum())

    if n_unsigned:
        _log.warning(
            '[OmniPath] Dropped %d CollecTRI interactions with undefined sign.',
            n_unsigned,
        )
        ct = ct.dropna(subset=['mor'])

    ct['mor'] = ct['mor'].astype(int)
    ct = ct.rename(
        columns={'source_genesymbol': 'source', 'target_genesymbol': 'target'},
    )

    if load_meta:
        ct['PMIDs'] = ct['references'].map(_pmids)
        ct = ct.rename(columns={'sources': 'resources'})
        ct = ct[[
            'source', 'target', 'mor',
            'resources', 'PMIDs', 'sign_decision', 'TF_category',
        ]]
    else:
        ct = ct[['source', 'target', 'mor']]

    ct = ct.reset_index(drop=True)
    _log.info('[OmniPath] %d CollecTRI interactions.', len(ct))

    return ct
