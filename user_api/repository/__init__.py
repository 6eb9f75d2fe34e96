"""Repository layer: owns stored user records.

Keep implementations thin and focused, so services never touch the
underlying collection directly.
"""
