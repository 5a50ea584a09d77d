"""Simulation systems.

Each module exposes pure functions over :class:`pellet_chase.state.State`.
:func:`pellet_chase.step.step` calls them in a fixed order once per tick:
direction requests, player move (wall check), pellet collection and score,
adversary moves, adversary collision.
"""
