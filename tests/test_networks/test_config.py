#!/usr/bin/env python

"""Tests for omnipath_prior.networks._config module."""

import pytest

from omnipath_prior.networks._config import (
    _merged,
    _nest_builders,
    builder_config,
    config,
    default_config,
)
from omnipath_prior.networks._errors import ConfigurationError


class TestDefaultConfig:
    """Tests for default_config."""

    def test_returns_dict(self):
        cfg = default_config()
        assert isinstance(cfg, dict)

    def test_has_organism(self):
        cfg = default_config()
        assert cfg['organism'] == 'human'

    def test_fallback_organisms(self):
        cfg = default_config()
        assert cfg['organisms'] == {'human': 9606, 'mouse': 10090, 'rat': 10116}

    def test_builders(self):
        cfg = default_config()
        assert set(cfg['builders']) == {'dorothea', 'collectri', 'progeny'}

    def test_dorothea_defaults(self):
        dorothea = default_config()['builders']['dorothea']
        assert dorothea['levels'] == ['A', 'B', 'C']
        assert dorothea['weight_dict'] == {'A': 1, 'B': 2, 'C': 3, 'D': 4}

    def test_complex_families_ordered(self):
        complexes = default_config()['builders']['collectri']['complexes']
        assert list(complexes) == ['AP1', 'NFKB']
        assert complexes['AP1'] == ['JUN', 'FOS']

    def test_client_defaults(self):
        client = default_config()['client']
        assert client['slow_call_bypass'] is False
        assert '{resource}' in client['static_url']

    def test_independent_copies(self):
        """Each call returns an independent copy."""

        cfg1 = default_config()
        cfg2 = default_config()
        cfg1['builders']['progeny']['top'] = 1
        assert cfg2['builders']['progeny']['top'] == 500


class TestConfig:
    """Tests for config with overrides."""

    def test_no_overrides(self):
        assert config() == default_config()

    def test_override_organism(self):
        cfg = config(organism='mouse')
        assert cfg['organism'] == 'mouse'

    def test_builder_shorthand(self):
        """Builder name as kwarg merges into builders."""

        cfg = config(dorothea={'levels': ['A']})
        assert cfg['builders']['dorothea']['levels'] == ['A']
        # other dorothea params preserved
        assert cfg['builders']['dorothea']['weight_dict']['D'] == 4

    def test_client_override(self):
        cfg = config(client={'slow_call_bypass': True})
        assert cfg['client']['slow_call_bypass'] is True
        assert 'static_url' in cfg['client']

    def test_dict_override(self):
        cfg = config({'organism': 10090})
        assert cfg['organism'] == 10090

    def test_yaml_file_override(self, tmp_path):
        yaml_file = tmp_path / 'override.yaml'
        yaml_file.write_text('builders:\n  progeny:\n    top: 100\n')

        cfg = config(yaml_file)
        assert cfg['builders']['progeny']['top'] == 100

    def test_multiple_overrides_order(self):
        """Later overrides take precedence."""

        cfg = config({'organism': 'rat'}, organism='human')
        assert cfg['organism'] == 'human'


class TestBuilderConfig:

    def test_defaults(self):
        assert builder_config('progeny') == {'top': 500}

    def test_from_given_config(self):
        cfg = config(progeny={'top': 10})
        assert builder_config('progeny', cfg) == {'top': 10}

    def test_unknown_builder(self):
        assert builder_config('nonexistent') == {}


class TestValidation:

    def test_unknown_builder(self):
        with pytest.raises(ConfigurationError, match='dorotea'):
            config(dorotea={'levels': ['A']})

    def test_unknown_section(self):
        with pytest.raises(ConfigurationError, match='clients'):
            config({'clients': {}})

    def test_yaml_not_mapping(self, tmp_path):
        yaml_file = tmp_path / 'list.yaml'
        yaml_file.write_text('- a\n- b\n')

        with pytest.raises(ConfigurationError, match='mapping'):
            config(yaml_file)

    def test_empty_yaml(self, tmp_path):
        yaml_file = tmp_path / 'empty.yaml'
        yaml_file.write_text('')

        assert config(yaml_file) == default_config()


class TestMerged:
    """Tests for _merged."""

    def test_nested_merge(self):
        result = _merged({'a': {'x': 1, 'y': 2}}, {'a': {'y': 3}})
        assert result == {'a': {'x': 1, 'y': 3}}

    def test_list_replaces(self):
        """Lists are replaced, not merged."""

        assert _merged({'a': [1, 2]}, {'a': [3]}) == {'a': [3]}

    def test_arguments_unchanged(self):
        base = {'a': {'x': 1}}
        override = {'a': {'x': [1]}}

        result = _merged(base, override)
        result['a']['x'].append(2)

        assert base == {'a': {'x': 1}}
        assert override == {'a': {'x': [1]}}


class TestNestBuilders:
    """Tests for _nest_builders."""

    def test_sections(self):
        assert _nest_builders({'organism': 10090}) == {'organism': 10090}

    def test_builder_shorthand(self):
        result = _nest_builders({'progeny': {'top': 5}})
        assert result == {'builders': {'progeny': {'top': 5}}}

    def test_mixed(self):
        result = _nest_builders({
            'client': {'slow_call_bypass': True},
            'collectri': {'complex_marker': 'CPLX'},
            'builders': {'progeny': {'top': 5}},
        })
        assert result['client'] == {'slow_call_bypass': True}
        assert result['builders'] == {
            'progeny': {'top': 5},
            'collectri': {'complex_marker': 'CPLX'},
        }
