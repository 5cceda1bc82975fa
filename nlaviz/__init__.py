"""Explore predicted cyanobacterial blooms in US lakes against nitrogen input.

Submodules:
- ``nlaviz.data``: NLA 2007 loading, column definitions and typed rows
- ``nlaviz.analysis``: lake filtering, bloom model fitting and prediction
- ``nlaviz.plotting``: the bloom map
- ``nlaviz.app``: the reactive controller behind the dashboard
- ``nlaviz.utils``: paths and configuration
"""

__version__ = "0.1.0"
