"""Headless driver for Snake Eater: a Gym-like env plus scripted policies."""
