"""Built-in variant rules.

Each module here exposes one `variant` object; colour_mix.registry picks
them up. The module docstring is what `colour-mix help <name>` prints.
"""
