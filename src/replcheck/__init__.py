# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental completeness checks for line-oriented REPL input."""

__version__ = "0.1.0"
