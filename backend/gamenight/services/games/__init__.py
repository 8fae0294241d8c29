"""Game domain services: rooms, trivia rounds, scoring and timers.

This package contains pure(ish) domain logic used by the socket handlers,
keeping transport concerns separated from core game mechanics.
"""
