"""Wrap-around snake: grid, fruit placement, tick state machine and frame loop."""
