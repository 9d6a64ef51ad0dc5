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

"""Signed prior-knowledge networks from OmniPath."""

__all__ = [
    '__author__',
    '__license__',
    '__version__',
    'get_collectri',
    'get_dorothea',
    'get_ksn_omnipath',
    'get_progeny',
    'get_resource',
    'networks',
    'show_resources',
]

from . import networks
from ._metadata import __author__, __license__, __version__
from .networks import (
    get_collectri,
    get_dorothea,
    get_ksn_omnipath,
    get_progeny,
    get_resource,
    show_resources,
)
