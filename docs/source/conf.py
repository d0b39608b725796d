import os.path
import sys
sys.path.insert(0, os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", ".."))
)

project = "intrange"
copyright = "2024, intrange contributors"
author = "intrange contributors"
version = "1.0.0"
release = version
extensions = ["sphinx.ext.autodoc"]
html_theme = "python_docs_theme"

autodoc_typehints = "none"
autodoc_member_order = "bysource"
