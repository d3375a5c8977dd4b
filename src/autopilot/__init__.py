"""Headless driver and simple autopilots for the snake game."""
