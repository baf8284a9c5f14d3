"""colour_mix.core — Foundation layer.

Contains the colour model, mixing arithmetic, previews, configuration and
the report builder. This module has NO dependencies on colour_mix.variants
or colour_mix.registry. Only stdlib, numpy, and PIL are allowed here.
"""
