"""Fitness challenge tracker: daily check-ins, streaks, badges and progress."""
