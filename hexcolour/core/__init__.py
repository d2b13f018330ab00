"""hexcolour.core — Foundation layer.

Contains the colour types, notation table, bit-packing encoder, renderer,
mixing helpers, env config and report builder.
This module has NO dependencies on hexcolour.commands or hexcolour.registry.
Only stdlib and numpy are allowed here.
"""
