#!/usr/bin/env python

"""Shared test fixtures for omnipath_prior tests."""

from unittest.mock import patch

import pandas as pd
import pytest

from omnipath_prior.networks._client import OmnipathClient
from omnipath_prior.networks._errors import TransientFetchFailure


class FakeClient(OmnipathClient):
    """
    Client serving preset tables instead of the OmniPath web service.

    Live tables are looked up by query name (``'dorothea'``,
    ``'collectri'``, ``'tf_mirna'``, ``'enzsub'``, an annotation
    resource name, or ``'annotation resources'``).  A missing entry or
    an exception instance makes the live call fail.  Static snapshots
    are real files under *static_dir*.
    """

    def __init__(self, live=None, static_dir=None, orthologs=None, ids=None, **kwargs):

        static_url = (
            str(static_dir / '{query}_{resource}_{organism}.tsv')
            if static_dir else
            '/nonexistent/{query}_{resource}_{organism}.tsv'
        )
        super().__init__(static_url=static_url, **kwargs)
        self.live = live or {}
        self.orthologs = orthologs or {}
        self.ids = ids or {}
        self.calls = []

    def _live(self, query, call):

        self.calls.append(query)

        if self.slow_call_bypass:
            raise TransientFetchFailure(query, 'bypassed')

        result = self.live.get(query)

        if result is None:
            raise TransientFetchFailure(query)

        if isinstance(result, Exception):
            raise TransientFetchFailure(query) from result

        return result.copy() if isinstance(result, pd.DataFrame) else result

    def translate_orthology(self, df, column, target_organism, source_organism=9606):

        self.calls.append(('orthology', column, target_organism))
        return self._replace_column(df, column, self.orthologs, 'orthologous')

    def translate_ids(self, df, from_column, to_column, organism):

        self.calls.append(('ids', from_column, to_column, organism))
        df = df.copy()
        df[to_column] = df[from_column]
        return self._replace_column(df, to_column, self.ids, to_column)


def write_static(static_dir, query, resource, organism, df):
    """Write a static snapshot where :class:`FakeClient` looks for it."""

    df.to_csv(
        static_dir / f'{query}_{resource}_{organism}.tsv',
        sep='\t',
        index=False,
    )


@pytest.fixture
def fake_client():
    """Factory of :class:`FakeClient` instances."""

    return FakeClient


@pytest.fixture
def static_dir(tmp_path):
    """Directory for static snapshot files."""

    path = tmp_path / 'static'
    path.mkdir()
    return path


@pytest.fixture
def static_table(static_dir):
    """Write a static snapshot: ``static_table(query, resource, organism, df)``."""

    def _write(query, resource, organism, df):
        write_static(static_dir, query, resource, organism, df)

    return _write


@pytest.fixture(autouse=True)
def _offline_taxonomy():
    """Keep the organism resolver away from the pypath registry."""

    with patch(
        'omnipath_prior.networks._organism._registry_lookup',
        side_effect=RuntimeError('offline'),
    ) as mock:
        yield mock
