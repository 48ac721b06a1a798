"""ERP dashboard core package.

This package is organized by feature modules (access, attendance, ...)
with a thin Flask controller layer over plain service classes.
"""
