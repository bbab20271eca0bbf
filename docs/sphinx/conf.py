# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the chainparse documentation."""

project = "chainparse"
author = "Chainparse Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
