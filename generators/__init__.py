"""Seeded synthetic session and transaction samples for exercising the scorers."""
