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
Access to OmniPath tables for the network builders.

Live tables come from the OmniPath web service through the ``omnipath``
client.  When a live download fails, builders fall back to static
snapshots: version-pinned TSV exports of the same tables.  Which
post-processing a snapshot needs depends on its query kind; each
:class:`QueryKind` has exactly one strategy.

ID translation for non-human organisms uses pypath:
    - ``translate_orthology``: human UniProt → orthologous UniProt
      (``pypath.utils.orthology``)
    - ``translate_ids``: any ID type → any ID type
      (``pypath.utils.mapping``)
"""

from __future__ import annotations

__all__ = ['OmnipathClient', 'QueryKind']

import enum
import logging
from collections.abc import Callable, Iterable

import pandas as pd

from ._config import config
from ._errors import ConfigurationError, TransientFetchFailure

_log = logging.getLogger(__name__)


class QueryKind(enum.Enum):
    """OmniPath query types with static snapshots."""

    INTERACTIONS = 'interactions'
    ANNOTATIONS = 'annotations'


# kind -> (class in `omnipath.interactions`, fixed query parameters)
_INTERACTION_QUERIES = {
    'dorothea': ('Dorothea', {'genesymbols': True}),
    'collectri': (
        'CollecTRI',
        {'genesymbols': True, 'loops': True, 'fields': ['extra_attrs']},
    ),
    'tf_mirna': (
        'TFmiRNA',
        {
            'genesymbols': True,
            'strict_evidences': True,
            'fields': ['extra_attrs'],
        },
    ),
}


def _levels_filter(df: pd.DataFrame, dorothea_levels=None, **kwargs) -> pd.DataFrame:
    """Keep interactions having any of the requested DoRothEA levels."""

    if dorothea_levels is None or 'dorothea_level' not in df.columns:
        return df

    levels = set(dorothea_levels)
    keep = df['dorothea_level'].apply(
        lambda lvl: isinstance(lvl, str) and bool(levels & set(lvl.split(';'))),
    )

    return df[keep]


def _no_filter(df: pd.DataFrame, **kwargs) -> pd.DataFrame:

    return df


_STATIC_STRATEGIES: dict[QueryKind, Callable[..., pd.DataFrame]] = {
    QueryKind.INTERACTIONS: _levels_filter,
    QueryKind.ANNOTATIONS: _no_filter,
}


class OmnipathClient:
    """
    Retrieve OmniPath tables, live or from static snapshots.

    Args:
        static_url:
            Template of the static snapshot URLs, with ``{query}``,
            ``{resource}`` and ``{organism}`` fields.
        slow_call_bypass:
            Fail every live call immediately, so that the builders use
            the static snapshots only.
    """

    def __init__(
        self,
        static_url: str | None = None,
        slow_call_bypass: bool = False,
    ):

        self.static_url = static_url or config()['client']['static_url']
        self.slow_call_bypass = slow_call_bypass

    @classmethod
    def from_config(cls, cfg: dict | None = None) -> OmnipathClient:
        """Create a client from the ``client`` section of a config."""

        params = (cfg or config()).get('client', {})

        return cls(
            static_url=params.get('static_url'),
            slow_call_bypass=params.get('slow_call_bypass', False),
        )

    def _live(self, query: str, call: Callable[[], pd.DataFrame]) -> pd.DataFrame:
        """Run a live query, reporting any failure as transient."""

        if self.slow_call_bypass:
            raise TransientFetchFailure(
                query,
                f'Live download of `{query}` bypassed by configuration.',
            )

        try:
            return call()
        except Exception as e:
            raise TransientFetchFailure(query) from e

    # -----------------------------------------------------------------------
    # Live queries
    # -----------------------------------------------------------------------

    def interactions(self, kind: str, organism: int, **params) -> pd.DataFrame:
        """
        Download an interaction table.

        Args:
            kind: ``'dorothea'``, ``'collectri'`` or ``'tf_mirna'``.
            organism: NCBI Taxonomy ID.
            **params: Passed to the ``omnipath`` query.

        Raises:
            TransientFetchFailure: The download failed.
        """

        if kind not in _INTERACTION_QUERIES:
            raise ConfigurationError(
                f'Unknown interaction query: {kind!r}. '
                f'Available: {list(_INTERACTION_QUERIES)}',
            )

        name, fixed = _INTERACTION_QUERIES[kind]
        query = {**fixed, **params}

        if kind != 'tf_mirna':
            query.setdefault('organism', organism)

        def call():

            import omnipath as op

            return getattr(op.interactions, name).get(**query)

        return self._live(kind, call)

    def enzsub(self, **params) -> pd.DataFrame:
        """Download the enzyme-PTM (enzyme-substrate) table."""

        params.setdefault('genesymbols', True)

        def call():

            import omnipath as op

            return op.requests.Enzsub.get(**params)

        return self._live('enzsub', call)

    def annotations(self, resource: str, **params) -> pd.DataFrame:
        """Download one annotation resource in wide format."""

        def call():

            import omnipath as op

            return op.requests.Annotations.get(
                resources=resource,
                wide=True,
                **params,
            )

        return self._live(resource, call)

    def annotation_resources(self) -> set[str]:
        """Names of the annotation resources available in OmniPath."""

        def call():

            import omnipath as op

            return op.requests.Annotations.resources()

        return set(self._live('annotation resources', call))

    # -----------------------------------------------------------------------
    # Static snapshots
    # -----------------------------------------------------------------------

    def static_table(
        self,
        query: QueryKind | str,
        resource: str,
        organism: int,
        **extra,
    ) -> pd.DataFrame:
        """
        Load a static snapshot of an OmniPath table.

        Args:
            query: Query kind of the table.
            resource: Resource name, e.g. ``'dorothea'``.
            organism: NCBI Taxonomy ID.
            **extra: Filters applied by the query kind's strategy,
                e.g. ``dorothea_levels``.

        Raises:
            ConfigurationError: Unknown query kind.
            TransientFetchFailure: The snapshot could not be read.
        """

        try:
            query = QueryKind(query)
        except ValueError as e:
            raise ConfigurationError(
                f'No static tables for query kind {query!r}.',
            ) from e

        url = self.static_url.format(
            query=query.value,
            resource=resource.lower(),
            organism=organism,
        )
        _log.info('[OmniPath] Loading static table: %s', url)

        try:
            df = pd.read_csv(url, sep='\t')
        except Exception as e:
            raise TransientFetchFailure(
                resource,
                f'Failed to load static `{query.value}` table of `{resource}`.',
            ) from e

        return _STATIC_STRATEGIES[query](df, **extra).reset_index(drop=True)

    def with_fallback(
        self,
        live: Callable[[], pd.DataFrame],
        query: QueryKind,
        resource: str,
        organism: int,
        **extra,
    ) -> pd.DataFrame:
        """
        Run a live query; on failure, load the static snapshot instead.

        Args:
            live: Zero-argument callable running the live query.
            query, resource, organism, **extra: Passed to
                :meth:`static_table`.
        """

        try:
            return live()
        except TransientFetchFailure as e:
            _log.warning(
                '[OmniPath] %s Falling back to the static `%s` table.',
                e,
                resource,
            )
            return self.static_table(query, resource, organism, **extra)

    # -----------------------------------------------------------------------
    # ID translation
    # -----------------------------------------------------------------------

    def translate_orthology(
        self,
        df: pd.DataFrame,
        column: str,
        target_organism: int,
        source_organism: int = 9606,
    ) -> pd.DataFrame:
        """
        Replace the IDs in *column* by their orthologs.

        One-to-many orthology yields one row per ortholog; rows without
        ortholog are dropped.
        """

        from pypath.utils import orthology

        orthologs = {
            uniprot: sorted(
                orthology.translate(
                    uniprot,
                    target=target_organism,
                    source=source_organism,
                ),
            )
            for uniprot in df[column].dropna().unique()
        }

        return self._replace_column(df, column, orthologs, 'orthologous')

    def translate_ids(
        self,
        df: pd.DataFrame,
        from_column: str,
        to_column: str,
        organism: int,
    ) -> pd.DataFrame:
        """
        Fill *to_column* by translating the IDs in *from_column*.

        Column names are the pypath ID type names (e.g. ``'uniprot'``,
        ``'genesymbol'``).  Ambiguous translations use the alphabetically
        first ID; rows that can not be translated are dropped.
        """

        import pypath.utils.mapping as mapping_mod

        translated = {
            name: sorted(
                mapping_mod.map_name(
                    name,
                    from_column,
                    to_column,
                    ncbi_tax_id=organism,
                ),
            )[:1]
            for name in df[from_column].dropna().unique()
        }

        df = df.copy()
        df[to_column] = df[from_column]

        return self._replace_column(df, to_column, translated, to_column)

    @staticmethod
    def _replace_column(
        df: pd.DataFrame,
        column: str,
        mapping: dict[str, Iterable[str]],
        label: str,
    ) -> pd.DataFrame:
        """Map *column* to lists of IDs, explode and drop the empty ones."""

        df = df.copy()
        df[column] = df[column].map(lambda x: list(mapping.get(x, ())))
        df = df.explode(column)
        n_failed = int(df[column].isna().sum())

        if n_failed:
            _log.warning(
                '[OmniPath] Dropped %d rows: no %s ID found.',
                n_failed,
                label,
            )

        return df.dropna(subset=[column]).reset_index(drop=True)
