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
Prior-knowledge networks from OmniPath.

Each builder downloads one OmniPath table (falling back to a static
snapshot where one exists) and normalises it into an edge list with
``source``, ``target`` and ``mor`` or ``weight`` columns, ready for
enrichment and activity inference methods.

Usage::

    from omnipath_prior.networks import (
        get_collectri,
        get_dorothea,
        get_ksn_omnipath,
        get_progeny,
    )

    # TF-target networks
    collectri = get_collectri(organism='human')
    dorothea = get_dorothea(organism='mouse', levels=['A', 'B'])

    # Pathway responsive genes
    progeny = get_progeny(top=100)

    # Kinase-substrate network
    ksn = get_ksn_omnipath()

    # Static snapshots only
    from omnipath_prior.networks import OmnipathClient
    client = OmnipathClient(slow_call_bypass=True)
    collectri = get_collectri(client=client)

    # Defaults from a config
    from omnipath_prior.networks import config
    cfg = config(organism='mouse', progeny={'top': 100})
    progeny = get_progeny(cfg=cfg)
"""

__all__ = [
    'ConfigurationError',
    'OmnipathClient',
    'QueryKind',
    'ResourceNotFound',
    'TransientFetchFailure',
    'UnsupportedOrganism',
    'check_organism',
    'config',
    'get_collectri',
    'get_dorothea',
    'get_ksn_omnipath',
    'get_progeny',
    'get_resource',
    'resources',
    'show_resources',
]

from . import resources
from ._client import OmnipathClient, QueryKind
from ._config import config
from ._errors import (
    ConfigurationError,
    ResourceNotFound,
    TransientFetchFailure,
    UnsupportedOrganism,
)
from ._organism import check_organism
from .resources import (
    get_collectri,
    get_dorothea,
    get_ksn_omnipath,
    get_progeny,
    get_resource,
    show_resources,
)
