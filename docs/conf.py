# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

# autodoc imports the package from the source tree
sys.path.insert(0, os.path.abspath("../src"))

# -- Project information -----------------------------------------------------

project = 'sinorm'
copyright = '2025, sinorm contributors'
author = 'sinorm contributors'
html_title = 'sinorm Docs'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

# keep grammar rules in the order they are defined
autodoc_member_order = "bysource"

# index.md embeds rst directives through myst's eval-rst fence
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
root_doc = "index"

exclude_patterns = ['_build']

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
