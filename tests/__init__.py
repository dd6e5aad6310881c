# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
tostring test suite.

Unit tests cover each building block in isolation; performance tests
exercise compiled renderers under concurrent use.
"""
