# Sphinx configuration for the Night Highway Patrol docs.
#
# Build with:  sphinx-build -b html docs/source docs/build

import os
import sys
import sphinx_rtd_dark_mode

# conf.py sits in docs/source; the packages live two levels up
sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------

project = "Night Highway Patrol"
copyright = "2026, Night Highway Patrol developers"
author = "Night Highway Patrol developers"
release = "0.1.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",    # API pages from docstrings
    "sphinx.ext.napoleon",   # NumPy-style Parameters / Returns sections
    "sphinx.ext.viewcode",   # source links
    "sphinx_rtd_dark_mode",
]

autodoc_member_order = "bysource"
napoleon_numpy_docstring = True
napoleon_google_docstring = False

templates_path = ["_templates"]
exclude_patterns = []

# -- HTML output -------------------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_static_path = ["_static"]

# The ui package needs a display-capable pygame; the sim core imports cleanly.
autodoc_mock_imports = ["pygame"]
