"""
Layout definitions sub-package for gustave-ingest.

Contains YAML files that define the positional row schema of each known
Gustave workbook layout. The loader module (layout_registry.py in the
parent package) reads these files at runtime.
"""
