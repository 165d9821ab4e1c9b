"""Access domain: role contexts, per-kind policies and visibility filters.

Build a RoleContext once per request with RoleContextBroker, look up the
kind's policy in the PolicyRegistry, then call its predicates. For listing,
hand ``policy.visibility_filter(context)`` to SqlFilterTranslator.
"""
