"""Simulation loop, run states and the timed controller."""
