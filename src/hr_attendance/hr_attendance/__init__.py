"""HR attendance package.

Organized by feature modules (attendance, leaves, employees) with a thin Flask
controller layer over service and store layers. Persistence is an injected
key-value storage so the same services run against memory, JSON files or MySQL.
"""
