"""Rendering subpackage.

Reference renderers for the snapshot boundary. The engine itself never draws;
these are convenience consumers of :class:`pellet_chase.snapshot.Snapshot`:

* :mod:`pellet_chase.renderer.text`: one glyph per cell, for terminals/logs.
* :mod:`pellet_chase.renderer.image`: Pillow frames (walls, pellet dots, a
    wedge-mouthed player, round adversaries, game-over banner).
"""
