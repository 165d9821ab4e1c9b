"""Bastion: authorization and visibility engine for the control plane."""
