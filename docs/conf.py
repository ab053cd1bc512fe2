#!/usr/bin/env python3
# Sphinx config

import sys
import os

_project_dir = os.path.abspath('..')
sys.path.insert(0, _project_dir)

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

source_suffix = '.rst'
master_doc = 'index'

project = 'passgen'

# The short X.Y version.
with open(_project_dir + '/VERSION', 'r') as f:
    version = f.read().strip()
# The full version, including alpha/beta/rc tags.
release = version

exclude_patterns = ['_build']

# The reST default role (used for this markup: `text`) to use for all
# documents.
default_role = 'py:obj'

pygments_style = 'sphinx'


# -- Options for HTML output ----------------------------------------------

html_theme = 'classic'

htmlhelp_basename = 'passgendoc'


# -- Options for manual page output ---------------------------------------

man_pages = [
    ('index', 'passgen', 'Random and memorable password generator', [], 1),
]
