#!/usr/bin/env python

"""Tests for omnipath_prior.networks.resources.annotations module."""

import pandas as pd
import pytest

from omnipath_prior.networks._config import config
from omnipath_prior.networks._errors import (
    ResourceNotFound,
    TransientFetchFailure,
    UnsupportedOrganism,
)
from omnipath_prior.networks.resources.annotations import (
    get_resource,
    show_resources,
)

_SIGNOR = pd.DataFrame({
    'uniprot': ['P00533', 'P04637'],
    'genesymbol': ['EGFR', 'TP53'],
    'pathway': ['EGF', 'Apoptosis'],
})
_LISTED = {'SIGNOR', 'PROGENy', 'CellPhoneDB'}


class TestShowResources:

    def test_sorted(self, fake_client):
        client = fake_client(live={'annotation resources': _LISTED})
        assert show_resources(client=client) == ['CellPhoneDB', 'PROGENy', 'SIGNOR']


class TestGetResource:

    def test_human_untranslated(self, fake_client):
        client = fake_client(live={'annotation resources': _LISTED, 'SIGNOR': _SIGNOR})

        df = get_resource('SIGNOR', client=client)

        pd.testing.assert_frame_equal(df, _SIGNOR)
        assert not any(isinstance(c, tuple) for c in client.calls)

    def test_unlisted_proceeds(self, fake_client, caplog):
        client = fake_client(live={'annotation resources': {'PROGENy'}, 'SIGNOR': _SIGNOR})

        df = get_resource('SIGNOR', client=client)

        assert len(df) == 2
        assert 'not a valid resource' in caplog.text

    def test_registry_failure_proceeds(self, fake_client, caplog):
        client = fake_client(live={'SIGNOR': _SIGNOR})

        df = get_resource('SIGNOR', client=client)

        assert len(df) == 2
        assert 'Failed to check' in caplog.text

    def test_static_fallback(self, fake_client, static_dir, static_table):
        static_table('annotations', 'signor', 9606, _SIGNOR)
        client = fake_client(live={'annotation resources': _LISTED}, static_dir=static_dir)

        df = get_resource('SIGNOR', client=client)

        assert list(df['genesymbol']) == ['EGFR', 'TP53']

    def test_not_found(self, fake_client):
        client = fake_client(live={'annotation resources': _LISTED})

        with pytest.raises(ResourceNotFound) as excinfo:
            get_resource('SIGNOR', client=client)

        assert excinfo.value.resource == 'SIGNOR'
        assert 'SIGNOR' in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, Exception)

    def test_not_found_unlisted(self, fake_client):
        client = fake_client(live={'annotation resources': _LISTED})

        with pytest.raises(ResourceNotFound, match='not listed'):
            get_resource('Nonexistent', client=client)

    def test_unsupported_organism(self, fake_client):
        client = fake_client(live={'SIGNOR': _SIGNOR})

        with pytest.raises(UnsupportedOrganism):
            get_resource('SIGNOR', organism='dog', client=client)

        assert client.calls == []

    def test_mouse_translated(self, fake_client):
        client = fake_client(
            live={'annotation resources': _LISTED, 'SIGNOR': _SIGNOR},
            orthologs={'P00533': ['Q01279'], 'P04637': ['P02340']},
            ids={'Q01279': ['Egfr'], 'P02340': ['Trp53']},
        )

        df = get_resource('SIGNOR', organism='mouse', client=client)

        assert list(df['uniprot']) == ['Q01279', 'P02340']
        assert list(df['genesymbol']) == ['Egfr', 'Trp53']
        assert list(df['pathway']) == ['EGF', 'Apoptosis']
        assert ('orthology', 'uniprot', 10090) in client.calls
        assert ('ids', 'uniprot', 'genesymbol', 10090) in client.calls

    def test_rat_without_ortholog(self, fake_client):
        client = fake_client(
            live={'SIGNOR': _SIGNOR},
            orthologs={'P00533': ['P55245']},
            ids={'P55245': ['Egfr']},
        )

        df = get_resource('SIGNOR', organism=10116, client=client)

        assert list(df['genesymbol']) == ['Egfr']


class TestConfig:

    def test_show_resources_client(self):
        cfg = config(client={'slow_call_bypass': True})

        with pytest.raises(TransientFetchFailure):
            show_resources(cfg=cfg)

    def test_organism(self, fake_client):
        client = fake_client(
            live={'annotation resources': _LISTED, 'SIGNOR': _SIGNOR},
            orthologs={'P00533': ['Q01279']},
            ids={'Q01279': ['Egfr']},
        )

        df = get_resource('SIGNOR', client=client, cfg=config(organism='mouse'))

        assert list(df['genesymbol']) == ['Egfr']

    def test_static_from_config(self, static_dir, static_table):
        static_table('annotations', 'signor', 9606, _SIGNOR)
        cfg = config(client={
            'static_url': str(static_dir / '{query}_{resource}_{organism}.tsv'),
            'slow_call_bypass': True,
        })

        df = get_resource('SIGNOR', cfg=cfg)

        assert list(df['genesymbol']) == ['EGFR', 'TP53']
