import datetime

import optscan

# -- Project information -----------------------------------------------------

project = "Optscan"
copyright = f"{datetime.date.today().year}, Optscan contributors"
author = "Optscan contributors"
release = version = optscan.__version__


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
}
nitpick_ignore_regex = [(r"py:class", r"(.*\.)?(_t\.[^.]*|_[^.]*)")]
autodoc_typehints_format = "short"
autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
