"""
Version 1 of the API.

This subpackage bundles the contact endpoints together with the
service information and health routes.
"""
