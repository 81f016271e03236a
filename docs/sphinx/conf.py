# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the replcheck documentation.

Build with the package installed (``pip install -e .[dev]``) so autodoc can import it.
"""

project = "replcheck"
author = "replcheck Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"

html_theme = "alabaster"
