"""Utilities for Tumult PRNG."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023
