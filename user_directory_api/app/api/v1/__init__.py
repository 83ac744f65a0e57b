"""
Version 1 of the API.

This subpackage bundles the routes, the validation stage and the
route table of the first public version of the User Directory API.
"""
