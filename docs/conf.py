# Sphinx configuration for the pytsvector API docs.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join("..", "src")))

project = "pytsvector"
copyright = "2026, pytsvector developers"
author = "pytsvector developers"
version = "1.0"
release = "1.0.0"

extensions = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"

exclude_patterns = ["_build"]
html_theme = "alabaster"
