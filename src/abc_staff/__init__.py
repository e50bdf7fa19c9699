"""ABC Staff checkout payroll package.

Organized by feature modules (attendance, payroll, stores, ...) with a thin
Flask controller layer on top of service/repository layers.
"""
