"""Quota domain: invariant policies that gate resource creation.

Quota checks run on the creation path only, after the access policy has
allowed ``create``. They read aggregate organization state at call time and
do not reserve capacity.
"""
