"""Validation domain: stable translation of persistence validation failures.

The persistence layer reports failures as field -> error symbols. This
domain maps them, per resource kind, onto user-facing ``ErrorCode`` values
so that e.g. a duplicate name and an exceeded quota stay distinguishable.
"""
