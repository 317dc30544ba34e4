import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

from password_zen import __version__  # noqa: E402

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = "password-zen"
copyright = "2025, Mahadeva Sankaram"
author = "Mahadeva Sankaram"
release = __version__

# -- General configuration ---------------------------------------------------

suppress_warnings = ["autosectionlabel.*"]

extensions = [
    "sphinx.ext.napoleon",
    "sphinx.ext.autosectionlabel",
    "sphinx_prompt",
    "sphinx_inline_tabs",
    "sphinx_click",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
html_title = f"{project} documentation v{release}"
htmlhelp_basename = "password-zen-releasedoc"
